"""
Line Pattern Tests

Tests for the builtin class/method patterns and the lifecycle
alternation builder.
"""

import re

import pytest

from monoscan.patterns import (
    BASE_CLASS_CLAUSE,
    BUILTIN_PATTERNS,
    CLASS_HEADER,
    COMPONENT_CLASS,
    METHOD_HEADER,
    RegexPattern,
    build_lifecycle_pattern,
)


class TestRegexPattern:
    """Tests for the RegexPattern value type."""

    def test_compiles_on_creation(self):
        p = RegexPattern(name="digits", pattern=r"(\d+)")
        assert isinstance(p.compiled, re.Pattern)
        assert p.first_group("abc 42") == "42"
        assert p.first_group("abc") is None

    def test_invalid_pattern_raises(self):
        with pytest.raises(re.error):
            RegexPattern(name="bad", pattern="(")

    def test_frozen(self):
        p = RegexPattern(name="x", pattern="x")
        with pytest.raises(AttributeError):
            p.name = "y"  # type: ignore[misc]

    def test_builtins_registered_by_name(self):
        assert set(BUILTIN_PATTERNS) == {
            "class_header",
            "base_class_clause",
            "component_class",
            "method_header",
        }


class TestClassPatterns:
    """Tests for CLASS_HEADER, BASE_CLASS_CLAUSE and COMPONENT_CLASS."""

    @pytest.mark.parametrize("line", [
        "class Foo",
        "public class Foo : Bar",
        "sealed class Foo{",
        "class Foo, Bar",
    ])
    def test_class_header_matches(self, line: str):
        assert CLASS_HEADER.matches(line)

    def test_class_header_requires_keyword(self):
        assert not CLASS_HEADER.matches("struct Foo {")

    @pytest.mark.parametrize("line,base", [
        ("class Foo : MonoBehaviour", "MonoBehaviour"),
        ("class Foo : MonoBehaviour {", "MonoBehaviour"),
        ("class Foo:Bar{", "Bar"),
        ("class Foo : Bar, IBaz", "Bar"),
    ])
    def test_base_class_capture(self, line: str, base: str):
        assert BASE_CLASS_CLAUSE.first_group(line) == base

    def test_no_base_clause(self):
        assert BASE_CLASS_CLAUSE.first_group("class Foo {") is None

    @pytest.mark.parametrize("line", [
        "public class A : MonoBehaviour",
        "class A:NetworkBehaviour",
        "public partial class A : MonoBehaviour, IPointerClickHandler",
    ])
    def test_component_class(self, line: str):
        assert COMPONENT_CLASS.matches(line)

    def test_component_class_rejects_other_bases(self):
        assert not COMPONENT_CLASS.matches("class A : ScriptableObject")
        assert not COMPONENT_CLASS.matches("class A")


class TestMethodPattern:
    """Tests for METHOD_HEADER."""

    @pytest.mark.parametrize("line,name", [
        ("void Update()", "Update"),
        ("  private void OnTriggerEnter(Collider other)", "OnTriggerEnter"),
        ("void Move ()", "Move"),
        ("public override void Awake() {", "Awake"),
    ])
    def test_method_name(self, line: str, name: str):
        assert METHOD_HEADER.first_group(line) == name

    def test_non_void(self):
        assert METHOD_HEADER.first_group("bool IsReady()") is None


class TestLifecyclePattern:
    """Tests for build_lifecycle_pattern."""

    def test_alternation_over_names(self):
        p = build_lifecycle_pattern(["Awake", "Update"])
        assert p.matches("void Awake()")
        assert p.matches("void Update()")
        assert not p.matches("void Start()")

    def test_overlapping_names(self):
        p = build_lifecycle_pattern(["OnCollisionEnter", "OnCollisionEnter2D"])
        assert p.first_group("void OnCollisionEnter2D(Collision2D c)") == "OnCollisionEnter2D"
        assert p.first_group("void OnCollisionEnter(Collision c)") == "OnCollisionEnter"

    def test_metacharacters_escaped(self):
        p = build_lifecycle_pattern(["A+B"])
        assert p.matches("void A+B()")
        assert not p.matches("void AAB()")

    def test_empty(self):
        assert not build_lifecycle_pattern([]).matches("void Update()")
