"""Tests for the SelectorBuilder facade and module-level helpers."""

import os
import subprocess
import sys
import warnings
from pathlib import Path

import pytest
from pydantic import ValidationError

import selectorkit
from selectorkit import (
    BuilderSettings,
    CombinedSelector,
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorBuilder,
    SelectorOrderError,
    SimpleSelector,
    combine,
    default_builder,
    make_attr,
    make_class,
    make_element,
    make_id,
    make_pseudo_class,
    make_pseudo_element,
)


@pytest.mark.parametrize(
    ("method", "value", "expected"),
    [
        ("element", "div", "div"),
        ("id", "main", "#main"),
        ("class_", "box", ".box"),
        ("attr", "type=text", "[type=text]"),
        ("pseudo_class", "hover", ":hover"),
        ("pseudo_element", "after", "::after"),
    ],
)
def test_each_method_starts_a_new_selector(builder, method, value, expected):
    first = getattr(builder, method)(value)
    second = getattr(builder, method)(value)
    assert isinstance(first, SimpleSelector)
    assert first is not second
    assert first.stringify() == expected


def test_facade_examples(builder):
    assert builder.id("main").class_("container").class_("editable").stringify() == (
        "#main.container.editable"
    )
    assert builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify() == (
        'a[href$=".png"]:focus'
    )


def test_facade_errors(builder):
    with pytest.raises(SelectorOrderError):
        builder.element("div").id("id").element("span")
    with pytest.raises(DuplicateSelectorPartError):
        builder.id("a").id("b")


def test_facade_combine(builder):
    node = builder.combine(builder.element("div"), ">", builder.element("span"))
    assert isinstance(node, CombinedSelector)
    assert node.stringify() == "div > span"


def test_unknown_combinator_allowed_by_default(builder):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        node = builder.combine(builder.element("a"), "|", builder.element("b"))
    assert node.stringify() == "a | b"


def test_unknown_combinator_warns():
    builder = SelectorBuilder(BuilderSettings(_env_file=None, combinator_policy="warn"))
    with pytest.warns(UserWarning, match="unknown combinator"):
        node = builder.combine(builder.element("a"), "|", builder.element("b"))
    assert node.stringify() == "a | b"


def test_unknown_combinator_rejected(strict_builder):
    with pytest.raises(InvalidCombinatorError) as excinfo:
        strict_builder.combine(strict_builder.element("a"), "", strict_builder.element("b"))
    assert excinfo.value.combinator == ""
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("combinator", [" ", "+", "~", ">"])
def test_known_combinators_pass_strict_policy(strict_builder, combinator):
    node = strict_builder.combine(
        strict_builder.element("a"), combinator, strict_builder.element("b")
    )
    assert node.stringify() == f"a {combinator} b"


def test_custom_known_combinators():
    settings = BuilderSettings(
        _env_file=None, combinator_policy="error", known_combinators=(">", "||")
    )
    builder = SelectorBuilder(settings)
    assert builder.combine(builder.class_("a"), "||", builder.class_("b")).stringify() == (
        ".a || .b"
    )
    with pytest.raises(InvalidCombinatorError):
        builder.combine(builder.class_("a"), "+", builder.class_("b"))


def test_module_level_helpers():
    assert make_element("ul").stringify() == "ul"
    assert make_id("nav").stringify() == "#nav"
    assert make_class("a").class_("a").stringify() == ".a.a"
    assert make_attr("lang").stringify() == "[lang]"
    assert make_pseudo_class("checked").stringify() == ":checked"
    assert make_pseudo_element("marker").stringify() == "::marker"
    assert combine(make_element("div"), ">", make_element("span")).stringify() == "div > span"


def test_nested_combine_rendering():
    a, b, c = make_element("a"), make_class("b"), make_id("c")
    tree = combine(combine(a, "+", b), "~", c)
    assert tree.stringify() == a.stringify() + " + " + b.stringify() + " ~ " + c.stringify()


def test_default_builder_is_cached_and_exported():
    assert isinstance(default_builder(), SelectorBuilder)
    assert default_builder() is default_builder()
    assert selectorkit.css_selector_builder is default_builder()


@pytest.fixture
def fresh_default_builder():
    """Reset the cached default builder around a test."""
    default_builder.cache_clear()
    yield
    default_builder.cache_clear()


def test_warning_points_at_caller_of_builder_combine():
    builder = SelectorBuilder(BuilderSettings(_env_file=None, combinator_policy="warn"))
    with pytest.warns(UserWarning) as record:
        builder.combine(builder.element("a"), "|", builder.element("b"))
    assert record[0].filename == __file__


def test_warning_points_at_caller_of_module_combine(monkeypatch, fresh_default_builder):
    monkeypatch.setenv("SELECTORKIT_COMBINATOR_POLICY", "warn")
    with pytest.warns(UserWarning, match="unknown combinator") as record:
        combine(make_element("a"), "|", make_element("b"))
    assert record[0].filename == __file__


def test_invalid_dotenv_fails_on_first_use_not_import(
    monkeypatch, tmp_path, fresh_default_builder
):
    monkeypatch.delenv("SELECTORKIT_COMBINATOR_POLICY", raising=False)
    (tmp_path / ".env").write_text("SELECTORKIT_COMBINATOR_POLICY=strict\n")
    monkeypatch.chdir(tmp_path)

    # Part constructors never touch settings
    assert make_class("a").stringify() == ".a"
    with pytest.raises(ValidationError):
        combine(make_element("a"), ">", make_element("b"))


def test_import_succeeds_with_invalid_dotenv(tmp_path):
    (tmp_path / ".env").write_text("SELECTORKIT_COMBINATOR_POLICY=strict\n")
    src = Path(selectorkit.__file__).resolve().parent.parent
    env = {k: v for k, v in os.environ.items() if not k.startswith("SELECTORKIT_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-c", "import selectorkit; print(selectorkit.make_id('x').stringify())"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "#x"
