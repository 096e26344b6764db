"""
建立型模式範例
"""
