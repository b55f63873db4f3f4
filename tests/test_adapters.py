"""
Tests for adapters — glob matching and mustache rendering.
"""

import pytest
from chevron.tokenizer import ChevronError
from wcmatch import glob

from ngtemplatecache.adapters import GlobMatcher, MustacheRenderer
from ngtemplatecache.adapters.glob import flags_for


# ═══════════════════════════════════════════════════════════════════
#  GlobMatcher
# ═══════════════════════════════════════════════════════════════════


class TestGlobMatcher:
    def test_globstar_matches_top_level_and_nested(self):
        m = GlobMatcher("**/*.html")
        assert m.match("one.html")
        assert m.match("path/two.html")
        assert m.match("a/b/c/deep.html")

    def test_other_extensions_rejected(self):
        m = GlobMatcher("**/*.html")
        assert not m.match("ignore.txt")
        assert not m.match("path/two.html.bak")

    def test_dot_files_excluded_by_default(self):
        m = GlobMatcher("**/*.html")
        assert not m.match("path/.hidden.html")
        assert not m.match(".hidden/page.html")

    def test_dot_option_includes_dot_files(self):
        m = GlobMatcher("**/*.html", {"dot": True})
        assert m.match("path/.hidden.html")
        assert m.match(".hidden/page.html")

    def test_limited_pattern(self):
        m = GlobMatcher("path/**/*")
        assert m.match("path/two.html")
        assert not m.match("one.html")

    def test_nocase(self):
        assert not GlobMatcher("*.html").match("ONE.HTML")
        assert GlobMatcher("*.html", {"nocase": True}).match("ONE.HTML")

    def test_match_base(self):
        assert not GlobMatcher("*.html").match("path/two.html")
        assert GlobMatcher("*.html", {"matchBase": True}).match("path/two.html")

    def test_braces(self):
        m = GlobMatcher("**/*.{html,htm}")
        assert m.match("a.htm")
        assert m.match("b/c.html")
        assert not GlobMatcher("**/*.{html,htm}", {"nobrace": True}).match("a.htm")

    def test_negation(self):
        m = GlobMatcher("!**/*.txt")
        assert m.match("one.html")
        assert not m.match("ignore.txt")

    def test_pattern_property_and_repr(self):
        m = GlobMatcher("**/*.html")
        assert m.pattern == "**/*.html"
        assert "**/*.html" in repr(m)


class TestFlagsFor:
    def test_defaults(self):
        flags = flags_for(None)
        assert flags & glob.GLOBSTAR
        assert flags & glob.BRACE
        assert not flags & glob.DOTGLOB

    def test_disable_globstar(self):
        assert not flags_for({"noglobstar": True}) & glob.GLOBSTAR

    def test_false_option_keeps_default(self):
        assert flags_for({"noglobstar": False}) & glob.GLOBSTAR
        assert not flags_for({"dot": False}) & glob.DOTGLOB

    def test_unknown_option_ignored(self):
        assert flags_for({"flipNegate": True}) == flags_for({})


# ═══════════════════════════════════════════════════════════════════
#  MustacheRenderer
# ═══════════════════════════════════════════════════════════════════


class TestMustacheRenderer:
    def test_triple_brace_is_raw(self):
        r = MustacheRenderer()
        assert r.render("{{{x}}}", {"x": "<a href=\"#\">&</a>"}) == "<a href=\"#\">&</a>"

    def test_double_brace_escapes_html(self):
        r = MustacheRenderer()
        out = r.render("{{x}}", {"x": "<b>&</b>"})
        assert "<b>" not in out
        assert "&lt;b&gt;" in out

    def test_section_rendered_when_truthy(self):
        r = MustacheRenderer()
        t = "m('{{{module}}}'{{#standalone}},[]{{/standalone}})"
        assert r.render(t, {"module": "a", "standalone": True}) == "m('a',[])"
        assert r.render(t, {"module": "a", "standalone": False}) == "m('a')"

    def test_missing_key_renders_empty(self):
        assert MustacheRenderer().render("[{{{nothing}}}]", {}) == "[]"

    def test_malformed_template_raises(self):
        with pytest.raises(ChevronError):
            MustacheRenderer().render("{{/never_opened}}", {})

    def test_booleans_interpolate_as_js_literals(self):
        r = MustacheRenderer()
        assert r.render("{{{a}}}|{{b}}", {"a": False, "b": True}) == "false|true"

    def test_boolean_sections_keep_truthiness(self):
        r = MustacheRenderer()
        t = "{{#on}}yes{{/on}}{{^on}}no{{/on}}"
        assert r.render(t, {"on": True}) == "yes"
        assert r.render(t, {"on": False}) == "no"

    def test_nested_booleans(self):
        r = MustacheRenderer()
        assert r.render("{{{opts.dot}}}", {"opts": {"dot": True}}) == "true"

    def test_escaped_mode_leaves_single_quotes(self):
        """Only & < > " are entity-encoded in double-brace mode."""
        assert MustacheRenderer().render("{{x}}", {"x": "a'b/c=d"}) == "a'b/c=d"
