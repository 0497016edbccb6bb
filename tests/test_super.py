#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import threading

import pytest

from classface import Dispatcher


class TestConstructorSuper:

    def test_chain(self, factory):
        def init_a(self, name):
            self.name = name
            self.trail = ["A"]

        def init_b(self, name):
            self.super_(name)
            self.trail.append("B")

        def init_c(self, name):
            self.super_(name.upper())
            self.trail.append("C")

        A = factory({"__init__": init_a})
        B = factory(A, {"__init__": init_b})
        C = factory(B, {"__init__": init_c})
        c = C("rex")
        assert c.trail == ["A", "B", "C"]
        assert c.name == "REX"

    def test_only_first_parent(self, factory):
        calls = []
        First = factory({"__init__": lambda self: calls.append("first")})
        Second = factory({"__init__": lambda self: calls.append("second")})

        def init(self):
            self.super_()

        factory([First, Second], {"__init__": init})()
        assert calls == ["first"]

    def test_no_parent(self, factory):
        def init(self):
            self.result = self.super_()

        assert factory({"__init__": init})().result is None

    def test_overloaded_constructor_chain(self, factory):
        def overload(name, ctor):
            def dispatch(self, *args):
                return ctor(self, *args)
            return dispatch

        factory.overload = overload

        def init_a(self):
            self.trail = ["A"]

        def init_b(self):
            self.super_()
            self.trail.append("B")

        A = factory({"__init__": init_a})
        B = factory(A, {"__init__": init_b})
        assert B().trail == ["A", "B"]


class TestMethodSuper:

    def test_three_levels(self, factory):
        def name_a(self):
            return "A"

        def name_b(self):
            return "B>" + self.super_()

        def name_c(self):
            return "C>" + self.super_()

        A = factory({"name": name_a})
        B = factory(A, {"name": name_b})
        C = factory(B, {"name": name_c})
        assert C().name() == "C>B>A"
        assert B().name() == "B>A"

    def test_arguments_pass_through(self, factory):
        def add_a(self, a, b=0):
            return a + b

        def add_b(self, a, b=0):
            return self.super_(a, b=b) * 10

        A = factory({"add": add_a})
        B = factory(A, {"add": add_b})
        assert B().add(1, b=2) == 30

    def test_most_right_parent_wins(self, factory):
        P1 = factory({"who": lambda self: "P1"})
        P2 = factory({"who": lambda self: "P2"})

        def who(self):
            return self.super_()

        Child = factory([P1, P2], {"who": who})
        assert Child().who() == "P2"
        Flipped = factory([P2, P1], {"who": who})
        assert Flipped().who() == "P1"

    def test_skips_parents_without_member(self, factory):
        P1 = factory({"who": lambda self: "P1"})
        P2 = factory({"other": lambda self: "P2"})

        def who(self):
            return self.super_()

        assert factory([P1, P2], {"who": who})().who() == "P1"

    def test_inherited_method_reaches_grandparent(self, factory):
        P1 = factory({"who": lambda self: "P1"})
        P2 = factory({"who": lambda self: "P2"})

        def who(self):
            return "child>" + self.super_()

        Child = factory([P1, P2], {"who": who})
        D = factory(Child, {})
        assert D().who() == "child>P2"

    def test_inherited_caller_runs_once(self, factory):
        trail = []

        def log_base(self):
            trail.append("Base")

        def log_p(self):
            trail.append("P")
            self.super_()

        Base = factory({"log": log_base})
        P = factory(Base, {"log": log_p})
        Q = factory(P, {})
        Q().log()
        assert trail == ["P", "Base"]

    def test_members_sharing_code(self, factory):
        def make_caller():
            def call_super(self):
                return self.super_()
            return call_super

        P = factory({"a": lambda self: "P.a", "b": lambda self: "P.b"})
        C = factory(P, {"a": make_caller(), "b": make_caller()})
        c = C()
        assert c.a() == "P.a"
        assert c.b() == "P.b"

    def test_one_function_under_two_names(self, factory):
        def call_super(self):
            return self.super_()

        P = factory({"a": lambda self: "P.a", "b": lambda self: "P.b"})
        C = factory(P, {"a": call_super, "b": call_super})
        assert C().a() == "P.a"
        assert C().b() == "P.b"

    def test_decorator_without_wraps(self, factory):
        def traced(fn):
            def wrapper(self, *args):
                return fn(self, *args)
            return wrapper

        A = factory({"name": lambda self: "A"})
        B = factory(A, {"name": traced(lambda self: "B>" + self.super_())})
        C = factory(B, {"name": traced(lambda self: "C>" + self.super_())})
        assert B().name() == "B>A"
        assert C().name() == "C>B>A"

    def test_super_outside_member_is_noop(self, factory):
        A = factory({"m": lambda self: "A"})
        B = factory(A, {"m": lambda self: self.super_()})
        assert B().super_() is None

    def test_no_ancestor_returns_none(self, factory):
        def m(self):
            return self.super_()

        A = factory({})
        assert factory(A, {"m": m})().m() is None
        assert factory({"m": m})().m() is None

    def test_non_function_ancestor_is_noop(self, factory):
        def m(self):
            return self.super_()

        A = factory({"m": 5})
        assert factory(A, {"m": m})().m() is None

    def test_nested_call_uses_class_dispatcher(self, factory):
        def greet_a(self):
            return "A.greet"

        def name_a(self):
            return "A"

        def greet_b(self):
            return self.super_() + "/" + self.name()

        def name_b(self):
            return "B>" + self.super_()

        def greet_c(self):
            return "C:" + self.super_()

        A = factory({"greet": greet_a, "name": name_a})
        B = factory(A, {"greet": greet_b, "name": name_b})
        C = factory(B, {"greet": greet_c})
        assert C().greet() == "C:A.greet/B>A"

    def test_plain_python_parent(self, factory):
        class Plain:
            def who(self):
                return "plain"

        def who(self):
            return "sub>" + self.super_()

        Sub = factory(Plain, {"who": who})
        assert Sub().who() == "sub>plain"

    def test_binding_restored_after_exception(self, factory):
        def fail_a(self):
            raise ValueError("boom")

        def fail_b(self):
            return self.super_()

        def name_a(self):
            return "A"

        def name_b(self):
            return "B>" + self.super_()

        A = factory({"fail": fail_a, "name": name_a})
        B = factory(A, {"fail": fail_b, "name": name_b})
        b = B()
        with pytest.raises(ValueError):
            b.fail()
        assert b.name() == "B>A"

    def test_concurrent_calls(self, factory):
        def work_a(self, n):
            return n

        def work_b(self, n):
            return self.super_(n) + 1

        A = factory({"work": work_a})
        B = factory(A, {"work": work_b})
        b = B()
        results = {}

        def run(n):
            results[n] = [b.work(n) for _ in range(200)]

        threads = [threading.Thread(target=run, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        for n, values in results.items():
            assert values == [n + 1] * 200


class TestSingletonSuper:

    def test_singleton_super_is_noop(self, factory):
        def m(self):
            return self.super_(1, 2)

        single = factory({"__singleton__": True, "m": m})
        assert single.m() is None

    def test_subclass_of_singleton(self, factory):
        def who(self):
            return "sub>" + self.super_()

        mixin = factory({"__singleton__": True, "who": lambda self: "mixin"})
        Sub = factory(mixin, {"who": who})
        assert Sub().who() == "sub>mixin"


class TestDispatcher:

    def test_installed_on_class(self, factory):
        A = factory({})
        B = factory(A, {})
        assert isinstance(B.super_, Dispatcher)
        assert B.super_.owner() is B
        assert B.super_.parents() == (A,)
        assert "super_" not in B.prototype
