"""Tests for back-references between repeated and cyclic objects."""
from __future__ import annotations

import math

from refprint.printer import dumps
from refprint.symbol import Symbol


class TestCircularReferences:
    def test_object_listed_once(self, block):
        A = {"name": "A"}
        B = {"name": "B"}
        B["A"] = A
        assert dumps({"A": A, "B": B}) == block("""
            {
                A: {
                    name: "A"
                }
                B: {
                    A: -> A
                    name: "B"
                }
            }
        """)

    def test_root_is_input(self, block):
        A = {}
        A["A"] = A
        assert dumps(A) == block("""
            {
                A: -> {input}
            }
        """)

    def test_root_list_cycle(self, block):
        items = [1]
        items.append(items)
        assert dumps(items) == block("""
            [
                1
                -> {input}
            ]
        """)

    def test_complex_references(self, block):
        zeta = Symbol("Zeta")
        Z = {"lowerCase": "z", "upperCase": "Z"}
        A = {
            "gamma": "G",
            "beta": "B",
            "alpha": "A",
            "overThere": math.pi,
            zeta: Z,
        }
        B = {"delta": "D", "epsilon": "E", zeta: Z, "alpha": A}
        A["omega"] = B
        A["self"] = A
        assert dumps(A) == block("""
            {
                alpha: "A"
                beta: "B"
                gamma: "G"
                omega: {
                    alpha: -> {input}
                    delta: "D"
                    epsilon: "E"
                    @@Zeta: {
                        lowerCase: "z"
                        upperCase: "Z"
                    }
                }
                overThere: math.pi
                self: -> {input}
                @@Zeta: -> omega.@@Zeta
            }
        """)

    def test_repeated_elements(self, block):
        shared = {"x": 1}
        assert dumps([shared, shared, shared]) == block("""
            [
                {
                    x: 1
                }
                -> [0]
                -> [0]
            ]
        """)

    def test_equal_but_distinct(self, block):
        assert dumps([{"x": 1}, {"x": 1}]) == block("""
            [
                {
                    x: 1
                }
                {
                    x: 1
                }
            ]
        """)

    def test_primitives_never_referenced(self, block):
        word = "repeat"
        big = 10 ** 30
        assert dumps([word, word, big, big]) == block(f"""
            [
                "repeat"
                "repeat"
                {big}
                {big}
            ]
        """)

    def test_quoted_path(self, block):
        inner = []
        assert dumps({"two words": inner, "z": inner}) == block("""
            {
                "two words": []
                z: -> ["two words"]
            }
        """)


class TestMapArrows:
    def test_key_is_reference(self, block):
        key = (1,)
        assert dumps([key, {key: "list"}]) == block("""
            [
                (
                    1
                )
                Map{
                    0.key -> [0]
                    0.value => "list"
                }
            ]
        """)

    def test_value_is_reference(self, block):
        items = [1]
        assert dumps([items, {1: items}]) == block("""
            [
                [
                    1
                ]
                Map{
                    0.key => 1
                    0.value -> [0]
                }
            ]
        """)

    def test_expanded_slot_value(self, block):
        assert dumps({1: [2]}) == block("""
            Map{
                0.key => 1
                0.value => [
                    2
                ]
            }
        """)

    def test_reference_into_slot(self, block):
        inner = {"x": 1}
        mapping = {None: "nothing", 2: inner}
        assert dumps([mapping, inner]) == block("""
            [
                Map{
                    0.key => None
                    0.value => "nothing"
                    1.key => 2
                    1.value => {
                        x: 1
                    }
                }
                -> [0].1.value
            ]
        """)

    def test_map_refers_to_root(self, block):
        mapping = {}
        mapping[0] = mapping
        assert dumps(mapping) == block("""
            Map{
                0.key => 0
                0.value -> {input}
            }
        """)


class TestSymbols:
    def test_symbol_value_is_tracked(self, block):
        sym = Symbol("S")
        assert dumps([sym, sym]) == block("""
            [
                Symbol(S)
                -> [0]
            ]
        """)

    def test_symbol_key_reprinted(self, block):
        sym = Symbol("S")
        assert dumps([{sym: 1}, {sym: 2}]) == block("""
            [
                {
                    @@S: 1
                }
                {
                    @@S: 2
                }
            ]
        """)

    def test_distinct_symbols_same_description(self, block):
        assert dumps([Symbol("S"), Symbol("S")]) == block("""
            [
                Symbol(S)
                Symbol(S)
            ]
        """)
