#!/usr/bin/env python3

import codecs
import os
import sys

import pytest
from click.testing import CliRunner

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from templategen import main
from templategen import utils

TEST_DOCUMENT = """---
title: Test
author: Alice
---
Hello **world**
"""


@pytest.fixture
def runner():
	return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	(tmp_path / "doc.md").write_text(TEST_DOCUMENT, encoding="utf-8")
	return tmp_path


def test_single_argument(runner, workdir):
	result = runner.invoke(main.main, ["doc.md"])
	assert result.exit_code == 0, result.output
	page = (workdir / "doc.md.html").read_text(encoding="utf-8")
	assert '<h1 class="title">Test</h1>' in page
	assert "Alice" in page
	assert "<strong>world</strong>" in page


def test_single_argument_uses_base_name(runner, workdir):
	(workdir / "sub").mkdir()
	(workdir / "sub" / "nested.md").write_text(TEST_DOCUMENT, encoding="utf-8")
	result = runner.invoke(main.main, [os.path.join("sub", "nested.md")])
	assert result.exit_code == 0, result.output
	assert (workdir / "nested.md.html").is_file()
	assert not (workdir / "sub" / "nested.md.html").exists()


def test_two_arguments(runner, workdir):
	result = runner.invoke(main.main, ["doc.md", "page.html"])
	assert result.exit_code == 0, result.output
	assert (workdir / "page.html").is_file()
	assert not (workdir / "doc.md.html").exists()


def test_output_is_reproducible(runner, workdir):
	runner.invoke(main.main, ["doc.md", "first.html"])
	runner.invoke(main.main, ["doc.md", "second.html"])
	assert (workdir / "first.html").read_bytes() == (workdir / "second.html").read_bytes()


@pytest.mark.parametrize("args", [
	[],
	["doc.md", "out.html", "extra"],
])
def test_usage_error(runner, workdir, args):
	before = sorted(os.listdir(workdir))
	result = runner.invoke(main.main, args)
	assert result.exit_code == 2
	assert "invalid number of arguments" in result.output
	assert sorted(os.listdir(workdir)) == before


@pytest.mark.parametrize("content", [
	"no delimiters here",
	"--- only one delimiter",
	"---\ntitle: [broken\n---\nbody",
])
def test_format_error(runner, workdir, content):
	(workdir / "bad.md").write_text(content, encoding="utf-8")
	result = runner.invoke(main.main, ["bad.md"])
	assert result.exit_code == 1
	assert "Error:" in result.output
	assert not (workdir / "bad.md.html").exists()


def test_missing_input(runner, workdir):
	result = runner.invoke(main.main, ["missing.md"])
	assert result.exit_code == 1
	assert "missing.md" in result.output
	assert not (workdir / "missing.md.html").exists()


def test_unwritable_output(runner, workdir):
	result = runner.invoke(main.main, ["doc.md", os.path.join("no_such_dir", "page.html")])
	assert result.exit_code == 1
	assert not (workdir / "no_such_dir").exists()


def test_parse_args():
	params = main.parse_args(("dir/doc.md",))
	assert params == main.Params(input="dir/doc.md", output="doc.md.html")
	params = main.parse_args(("doc.md", "out/page.html"))
	assert params == main.Params(input="doc.md", output="out/page.html")


def test_read_file_strips_bom(tmp_path):
	path = tmp_path / "bom.md"
	path.write_bytes(codecs.BOM_UTF8 + b"---\ntitle: T\n---\n")
	assert utils.read_file(path) == b"---\ntitle: T\n---\n"


def test_write_file_atomic(tmp_path):
	path = tmp_path / "page.html"
	utils.write_file_atomic(str(path), b"<html></html>")
	assert path.read_bytes() == b"<html></html>"
	assert os.listdir(tmp_path) == ["page.html"]


def test_write_file_atomic_keeps_target_on_failure(tmp_path, monkeypatch):
	path = tmp_path / "page.html"
	path.write_bytes(b"old")

	def failing_replace(src, dst):
		raise OSError("disk is full")

	monkeypatch.setattr(os, "replace", failing_replace)
	with pytest.raises(OSError):
		utils.write_file_atomic(str(path), b"new")
	assert path.read_bytes() == b"old"
	assert os.listdir(tmp_path) == ["page.html"]


def test_dash_prefixed_input(runner, workdir):
	(workdir / "-doc.md").write_text(TEST_DOCUMENT, encoding="utf-8")
	result = runner.invoke(main.main, ["-doc.md"])
	assert result.exit_code == 0, result.output
	assert (workdir / "-doc.md.html").is_file()


def test_write_file_atomic_respects_umask(tmp_path):
	path = tmp_path / "page.html"
	old_umask = os.umask(0o027)
	try:
		utils.write_file_atomic(str(path), b"<html></html>")
	finally:
		os.umask(old_umask)
	assert (path.stat().st_mode & 0o777) == 0o640
