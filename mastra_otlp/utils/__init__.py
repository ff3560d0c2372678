"""Utils — 日志等通用工具。"""
