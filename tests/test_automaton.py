"""
Tests for automaton compilation and the deduplication table.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from report_filter.matcher.automaton import AutomatonTable, compile_automaton, get_automaton_table
from report_filter.matcher.errors import InvalidPatternError
from report_filter.matcher.full_matcher import FullMatcher, UNCAPTURED


class TestAutomaton:

    def test_accepts_whole_text_only(self):
        automaton = compile_automaton(r'/cart/\w+')
        assert automaton.accepts('/cart/add')
        assert not automaton.accepts('https://shop.example.com/cart/add?pid=1')
        assert not automaton.accepts('/cart/add?pid=1')

    def test_unanchored_pattern_needs_wildcards_for_substrings(self):
        automaton = compile_automaton(r'.*/cart/.*')
        assert automaton.accepts('https://shop.example.com/cart/add?pid=1')
        assert not automaton.accepts('https://shop.example.com/account/login')

    def test_anchors_are_honoured(self):
        automaton = compile_automaton(r'^Login\.\d+$')
        assert automaton.accepts('Login.1')
        assert not automaton.accepts('DoLogin.1')

    def test_backreference_rejected(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_automaton(r'(a)\1')
        assert exc_info.value.engine == 'RE2'
        assert exc_info.value.pattern == r'(a)\1'


class TestAutomatonTable:

    def setup_method(self):
        self.table = AutomatonTable()

    def test_compiles_once_per_pattern(self):
        first = self.table.get_or_compile('abc')
        second = self.table.get_or_compile('abc')

        assert first is second
        assert len(self.table) == 1
        assert self.table.stats()['compilations'] == 1
        assert self.table.stats()['lookups'] == 2

    def test_distinct_patterns_get_distinct_entries(self):
        self.table.get_or_compile('abc')
        self.table.get_or_compile('abd')

        assert sorted(self.table.patterns()) == ['abc', 'abd']

    def test_failed_compilation_is_not_stored(self):
        with pytest.raises(InvalidPatternError):
            self.table.get_or_compile('(unclosed')
        assert '(unclosed' not in self.table
        assert len(self.table) == 0

    def test_process_table_is_shared(self):
        assert get_automaton_table() is get_automaton_table()

    def test_concurrent_requests_keep_one_automaton_per_pattern(self):
        patterns = [r'Login\.\d+', r'.*/cart/.*', r'(GET|POST)', r'5\d\d']
        requests = patterns * 50

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(self.table.get_or_compile, requests))

        assert len(self.table) == len(patterns)
        assert sorted(self.table.patterns()) == sorted(patterns)
        for pattern in patterns:
            stored = self.table.get_or_compile(pattern)
            # setdefault hands every racer the automaton that was stored first
            assert all(a is stored for p, a in zip(requests, results) if p == pattern)


class TestFullMatcher:

    def test_captures_groups(self):
        matcher = FullMatcher(r'(\w+)\.(\d+)')
        result = matcher.evaluate('Login.12')

        assert result.group(0) == 'Login.12'
        assert result.group(1) == 'Login'
        assert result.group(2) == '12'
        assert result.span == (0, 8)
        assert result.group_count == 2

    def test_non_participating_group_is_none(self):
        result = FullMatcher(r'a(b)?c').evaluate('ac')
        assert result.group(1) is None

    def test_no_match(self):
        assert FullMatcher('abc').evaluate('xyz') is None

    def test_match_must_cover_whole_text(self):
        assert FullMatcher(r'(\w+)\.(\d+)').evaluate('x Login.12 y') is None
        assert FullMatcher('abc').evaluate('xxabcxx') is None

    def test_results_are_independent_per_call(self):
        matcher = FullMatcher(r'id=(\d+)')
        first = matcher.evaluate('id=1')
        second = matcher.evaluate('id=22')

        assert first.group(1) == '1'
        assert second.group(1) == '22'

    def test_invalid_pattern_reports_position(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            FullMatcher('ab(c')
        assert exc_info.value.engine == 're'
        assert exc_info.value.position is not None
        assert 'ab(c' in str(exc_info.value)

    def test_uncaptured_state_has_no_groups(self):
        assert not UNCAPTURED.captured
        with pytest.raises(IndexError):
            UNCAPTURED.group(0)
