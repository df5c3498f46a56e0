"""Pytest 配置和 fixtures

定义所有测试共享的 fixtures 和配置。
"""

import pytest

from column_aligner import ColumnAligner
from column_aligner.alignment import BlockAligner
from column_aligner.core.rules import compile_rules
from column_aligner.utils import LINE_NUMBER_ENV, RULES_ENV, SELECTED_TEXT_ENV


@pytest.fixture
def default_aligner():
    """使用默认规则的对齐器"""
    return ColumnAligner()


@pytest.fixture
def block_aligner():
    """使用默认规则的块对齐器"""
    return BlockAligner(compile_rules())


@pytest.fixture
def clean_env(monkeypatch):
    """清除编辑器相关的环境变量"""
    for name in (RULES_ENV, SELECTED_TEXT_ENV, LINE_NUMBER_ENV):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def nested_source():
    """三行同缩进的块，前后各有一个不相关的块"""
    return "def  f():\n    a = 1\n    bcd = 2\n    ef = 3\nx  =  1\n"
