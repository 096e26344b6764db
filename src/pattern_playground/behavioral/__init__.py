"""
行為型模式範例
"""
