"""appmeta - 应用元数据注册服务"""

__version__ = "0.1.0"
