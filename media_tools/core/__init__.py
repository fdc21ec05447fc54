"""核心配置模块"""
