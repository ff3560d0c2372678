"""Core — 配置。"""
