"""配置常量和环境变量加载"""

import os

from dotenv import load_dotenv

load_dotenv()

# 服务配置
DEFAULT_ADDRESS = os.getenv("APPMETA_ADDRESS", ":8000")

# 模糊匹配配置
FUZZY_MATCH_THRESHOLD = float(os.getenv("APPMETA_FUZZY_THRESHOLD", "0.8"))

# 日志配置
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
