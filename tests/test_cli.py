#!/usr/bin/env python3
"""
配置与命令行测试
"""

import argparse
import io
import json

import pytest

from column_aligner import ColumnAligner, FormatOptions
from column_aligner.cli import main
from column_aligner.core import ConfigurationError
from column_aligner.output.formatter import OutputFormatter
from column_aligner.utils import (
    build_options_from_args,
    build_options_from_env,
    parse_line_number,
)


# 配置映射测试
def test_options_from_empty_env():
    """测试无环境变量时的默认配置"""
    assert build_options_from_env({}) == FormatOptions(
        rule_spec=None, selected_text=False, line_number=None
    )


def test_options_from_env():
    """测试从环境变量读取规则、选区与光标行"""
    env = {
        "TM_SOURCE_ALIGNMENT_PATTERN": "/:/a",
        "TM_SELECTED_TEXT": "",
        "TM_LINE_NUMBER": "3",
    }
    options = build_options_from_env(env)

    assert options.rule_spec == "/:/a"
    assert options.selected_text
    assert options.line_number == 3


def test_invalid_line_number():
    """测试非整数光标行"""
    with pytest.raises(ConfigurationError):
        build_options_from_env({"TM_LINE_NUMBER": "abc"})
    assert parse_line_number(" 7\n") == 7
    assert parse_line_number("") is None


def test_args_override_env():
    """测试命令行参数覆盖环境变量，None 不覆盖"""
    base = FormatOptions(rule_spec="/:/", selected_text=False, line_number=2)

    args = argparse.Namespace(rules=None, all=False, line=5)
    assert build_options_from_args(args, base) == FormatOptions("/:/", False, 5)

    args = argparse.Namespace(rules="/(=)/", all=True, line=None)
    assert build_options_from_args(args, base) == FormatOptions("/(=)/", True, 2)


# 报告测试
def test_build_report():
    _, results = ColumnAligner().format_with_report("x = 1\nxyz = 2\n\n  a: 1\n")
    report = OutputFormatter.build_report(results)

    assert report["summary"] == {
        "total_blocks": 2,
        "total_lines": 4,
        "formatted_blocks": 2,
        "changed_blocks": 1,
        "rules_applied": 1,
    }
    applied = report["blocks"][0]["applied_rules"]
    assert applied == [
        {"pattern": r"\s[-+\/*|]?(=)\s", "spacing": "BEFORE", "width": 4}
    ]


# 命令行测试
def test_cli_all_from_stdin(clean_env, capsys):
    """测试从标准输入读取并格式化全部块"""
    clean_env.setattr("sys.stdin", io.StringIO("x = 1\nxyz = 2\n"))

    assert main(["--all"]) == 0
    assert capsys.readouterr().out == "x   = 1\nxyz = 2\n"


def test_cli_cursor_from_env(clean_env, capsys, nested_source):
    """测试由 TM_LINE_NUMBER 选择光标所在块"""
    clean_env.setenv("TM_LINE_NUMBER", "2")
    clean_env.setattr("sys.stdin", io.StringIO(nested_source))

    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("def  f():\n    a   = 1\n")
    assert out.endswith("x  =  1\n")


def test_cli_selected_text_env(clean_env, capsys):
    clean_env.setenv("TM_SELECTED_TEXT", "k: v")
    clean_env.setenv("TM_SOURCE_ALIGNMENT_PATTERN", "/:/a")
    clean_env.setattr("sys.stdin", io.StringIO("k: v\nlonger: v\n"))

    assert main([]) == 0
    assert capsys.readouterr().out == "k:      v\nlonger: v\n"


def test_cli_files_and_report(clean_env, tmp_path):
    """测试文件输入输出与 JSON 报告"""
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    report = tmp_path / "report.json"
    source.write_text("a = 1\nbbb = 2\n", encoding="utf-8")

    code = main(
        [str(source), "--all", "-o", str(target), "--report", str(report)]
    )

    assert code == 0
    assert target.read_text(encoding="utf-8") == "a   = 1\nbbb = 2\n"
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["summary"]["changed_blocks"] == 1
    assert data["blocks"][0]["applied_rules"][0]["width"] == 4


def test_cli_malformed_rules(clean_env, capsys):
    """测试格式错误的规则返回错误码且不输出"""
    clean_env.setattr("sys.stdin", io.StringIO("x = 1\nxyz = 2\n"))

    assert main(["--all", "--rules", "/(=)"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_missing_input(clean_env, tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "--all"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_line_flag_ignores_bad_env_line(clean_env, capsys, nested_source):
    """测试 --line 覆盖无效的 TM_LINE_NUMBER"""
    clean_env.setenv("TM_LINE_NUMBER", "abc")
    clean_env.setattr("sys.stdin", io.StringIO(nested_source))

    assert main(["--line", "2"]) == 0
    assert capsys.readouterr().out.startswith("def  f():\n    a   = 1\n")


def test_cli_bad_env_line_without_flag(clean_env, capsys):
    clean_env.setenv("TM_LINE_NUMBER", "abc")
    clean_env.setattr("sys.stdin", io.StringIO("x = 1\n"))

    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_options_from_env_without_line_number():
    options = build_options_from_env({"TM_LINE_NUMBER": "abc"}, with_line_number=False)
    assert options.line_number is None
