import unittest
from typing import Optional, Union

from fakes import FakeContainer

from cradlebind import Cradle, as_class, as_value, parse_dependencies, parse_signature


class TestDependencyDiscovery(unittest.TestCase):
    def test_positional_parameters_in_declared_order(self):
        def target(a, b):
            return a, b

        assert parse_dependencies(target) == ("a", "b")

    def test_zero_parameters_yields_no_dependencies(self):
        assert parse_dependencies(lambda: None) == ()

    def test_parameters_with_defaults_are_dependencies(self):
        def target(host, port=5432):
            return host, port

        assert parse_dependencies(target) == ("host", "port")

    def test_dependencies_are_fixed_at_build_time(self):
        class Repo:
            def __init__(self, db):
                self.db = db

        registration = as_class(Repo)
        Repo.__init__ = lambda self, db, cache: None

        assert registration.dependencies == ("db",)


class TestCradleMarker(unittest.TestCase):
    def test_cradle_annotated_parameter_yields_no_dependencies(self):
        def target(cradle: Cradle):
            return cradle

        assert parse_dependencies(target) == ()

    def test_cradle_string_annotation_yields_no_dependencies(self):
        def target(cradle: "Cradle"):
            return cradle

        assert parse_dependencies(target) == ()

    def test_class_constructor_cradle_annotation(self):
        class Foo:
            def __init__(self, cradle: Cradle):
                self.x = cradle["x"]

        assert parse_dependencies(Foo) == ()

    def test_optional_cradle_annotation_yields_no_dependencies(self):
        class Foo:
            def __init__(self, cradle: Optional[Cradle] = None):  # noqa: UP045
                self.cradle = cradle

        def union_target(cradle: Union[Cradle, None]):  # noqa: UP007
            return cradle

        def pipe_target(cradle: Cradle | None):
            return cradle

        assert parse_dependencies(Foo) == ()
        assert parse_dependencies(union_target) == ()
        assert parse_dependencies(pipe_target) == ()

    def test_unresolved_pipe_string_annotation_yields_no_dependencies(self):
        def target(cradle: "Cradle | Missing"):  # noqa: F821
            return cradle

        with self.assertLogs("cradlebind", level="WARNING"):
            assert parse_dependencies(target) == ()

    def test_optional_cradle_class_is_not_given_a_named_cradle_dependency(self):
        class Foo:
            def __init__(self, cradle: Optional[Cradle] = None):  # noqa: UP045
                self.cradle = cradle

        cont = FakeContainer({"cradle": as_value("named registration")})

        assert as_class(Foo).classic().resolve(cont).cradle is None
        assert as_class(Foo).proxy().resolve(cont).cradle is cont.cradle
        assert cont.resolved == []


class TestSignatureEdgeCases(unittest.TestCase):
    def test_unresolvable_annotation_logs_warning_and_keeps_names(self):
        def target(db: "UndefinedType", cache):  # noqa: F821
            return db, cache

        with self.assertLogs("cradlebind", level="WARNING") as logs:
            assert parse_dependencies(target) == ("db", "cache")

        assert "UndefinedType" in logs.output[0]

    def test_class_without_init_yields_no_dependencies(self):
        class Plain: ...

        assert parse_signature(Plain) == ((), False)

    def test_zero_parameter_function_does_not_accept_cradle(self):
        assert parse_signature(lambda: None).accepts_cradle is False

    def test_variadic_function_accepts_cradle(self):
        def target(*args):
            return args

        assert parse_signature(target) == ((), True)

    def test_variadic_and_keyword_only_parameters_are_not_dependencies(self):
        def target(a, /, b, *args, c, **kwargs):
            return a, b, args, c, kwargs

        assert parse_dependencies(target) == ("a", "b")

    def test_inherited_variadic_constructor(self):
        class Base:
            def __init__(self, value, *args, **kwargs):
                self.value = value
                self.args = args
                self.kwargs = kwargs

        class Derived(Base): ...

        assert parse_dependencies(Derived) == ("value",)

    def test_uninspectable_callable_yields_no_dependencies(self):
        def target(a, b):
            return a, b

        target.__signature__ = "broken"

        with self.assertLogs("cradlebind", level="WARNING") as logs:
            assert parse_signature(target) == ((), True)

        assert "Unable to read signature" in logs.output[0]
