"""Tests for language detection heuristics."""

import time

from codesketch.core.structure_parser import detect_language
from codesketch.core.structure_parser.utils import detect_language_from_filename


class TestExtensionDetection:
    def test_python_extension_wins_over_content(self):
        assert detect_language("public class Foo extends Bar { int x; }", "Foo.py") == "python"

    def test_php_code_with_python_filename(self):
        assert detect_language("<?php function a() {}", "a.py") == "python"

    def test_case_insensitive(self):
        assert detect_language_from_filename("FOO.JAVA") == "java"
        assert detect_language_from_filename("index.PHP") == "php"

    def test_unknown_extension(self):
        assert detect_language_from_filename("main.rs") == ""
        assert detect_language_from_filename(None) == ""

    def test_unknown_extension_falls_back_to_content(self):
        assert detect_language("def f():\n    pass\n", "notes.txt") == "python"


class TestContentHeuristics:
    def test_java_class_extends(self):
        assert detect_language("class A extends B {\n}\n") == "java"

    def test_java_trailing_semicolon(self):
        assert detect_language("int x = 1;\n") == "java"

    def test_php_open_tag(self):
        assert detect_language("<?php\necho 'hi'\n") == "php"

    def test_php_function(self):
        assert detect_language("function helper($a) {\n}\n") == "php"

    def test_php_with_semicolons_reads_as_java(self):
        # The java slot is checked first, so any line ending in ";" wins
        assert detect_language("<?php\n$x = 1;\n") == "java"

    def test_python_class(self):
        assert detect_language("class A(B):\n    pass\n") == "python"

    def test_python_def(self):
        assert detect_language("    def run(self):\n        pass\n") == "python"

    def test_nothing_matches(self):
        assert detect_language("hello world") == ""

    def test_empty_code(self):
        assert detect_language("") == ""
        assert detect_language(None) == ""


class TestLargeInput:
    def test_newline_run_is_linear(self):
        start = time.perf_counter()
        assert detect_language("x" + "\n" * 200_000 + "x") == ""
        assert time.perf_counter() - start < 2.0

    def test_space_run_after_semicolon(self):
        start = time.perf_counter()
        assert detect_language(";" + " " * 200_000 + "x") == ""
        assert time.perf_counter() - start < 2.0

    def test_trailing_semicolon_still_java(self):
        assert detect_language("x = 1;   \ny = 2") == "java"

    def test_indented_def_still_python(self):
        assert detect_language("\n\n    def run(self):\n") == "python"
