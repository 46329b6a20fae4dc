"""
Default settings for headerstore.
headerstore的默认设置。

If you add a setting here remember to:
如果您在此处添加设置，请记住：

* add it in alphabetical order
  按字母顺序添加
* group similar settings without leaving blank lines
  分组类似设置，不留空行
"""

# Whether DefaultHeaders fills in DEFAULT_REQUEST_HEADERS
# DefaultHeaders是否填充DEFAULT_REQUEST_HEADERS
DEFAULT_HEADERS_ENABLED = True

# Headers added to outgoing requests that do not already carry them
# 添加到尚未包含这些头部的传出请求中的头部
DEFAULT_REQUEST_HEADERS = {
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en',
}

# Whether log records are written to the queue of a separate thread
# 日志记录是否写入单独线程的队列
ENQUEUE = True

# Encoding used when header blocks are converted to and from bytes
# 头部块与字节之间转换时使用的编码
HEADERS_ENCODING = 'utf-8'

# Logging settings
# 日志设置
LOG_ENABLED = True
LOG_ENCODING = 'utf-8'
LOG_FILE = None
LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{process}</cyan> | <cyan>{extra[package]}</cyan> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
LOG_LEVEL = 'DEBUG'
LOG_RETENTION = 10
LOG_ROTATION = '20MB'
LOG_STDOUT = True
