"""
ProjectHop - 本地项目发现与快速启动索引
"""
