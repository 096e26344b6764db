"""
結構型模式範例
"""
