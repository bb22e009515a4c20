APP_NAME = "vector-lifecycle"
APP_VERSION = "0.1.0"

__version__ = APP_VERSION
