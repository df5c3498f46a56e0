"""
Test Scripts - 测试脚本集合

此目录包含列对齐功能的 pytest 测试。

脚本列表:

1. test_all.py - 基础模块测试
   规则编译、空白规范化、分块。

2. test_block_aligner.py - 块对齐测试
   规则优先级、列填充、光标模式与整体格式化。

3. test_cli.py - 配置与命令行测试
   环境变量映射、命令行参数覆盖、JSON 报告。

运行所有测试:
  python -m pytest tests/ -v
"""
