"""
核心模块：配置、日志与传输层异常
"""
