"""
回归图表 Web服务器
"""
