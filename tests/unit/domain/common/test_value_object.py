"""Tests for the ValidatedValueObject base class."""

import copy
import pickle

import pydantic
import pytest

from valuegate.domain.common.errors import Error, ErrorKind
from valuegate.domain.common.exceptions import ConstructionError, ValidationError
from valuegate.domain.common.result import DONE, Failure, Success
from valuegate.domain.common.value_object import ValidatedValueObject, equals, value_hash


class Nickname(ValidatedValueObject[str]):
    def validate(self) -> None:
        if not self.value:
            raise ValidationError("Nickname cannot be empty", field="nickname")


class Percentage(ValidatedValueObject[int]):
    def validate(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValidationError("Percentage must be between 0 and 100", field="percentage")


class Anything(ValidatedValueObject[object]):
    pass


class Exploding(ValidatedValueObject[str]):
    def validate(self) -> None:
        raise RuntimeError("boom")


class Broken(ValidatedValueObject[int], factory=lambda: "not a value object"):
    pass


factory_calls: list[str] = []


def _make_counted() -> "Counted":
    factory_calls.append("called")
    return object.__new__(Counted)


class Counted(ValidatedValueObject[int], factory=_make_counted):
    pass


class TestConstruction:
    """A valid value is accepted by every entry point, unchanged."""

    def test_from_value(self) -> None:
        nickname = Nickname.from_value("ada")
        assert isinstance(nickname, Nickname)
        assert nickname.value == "ada"

    def test_constructor_runs_validation(self) -> None:
        assert Nickname("ada").value == "ada"
        with pytest.raises(ValidationError):
            Nickname("")

    def test_try_from(self) -> None:
        ok, nickname = Nickname.try_from("ada")
        assert ok is True
        assert nickname == Nickname.from_value("ada")

    def test_make_result_returns_raw_value(self) -> None:
        value = "ada"
        result = Nickname.make_result(value)
        assert isinstance(result, Success)
        assert result.unwrap() is value

    def test_check_result_returns_input_when_valid(self) -> None:
        previous = Success("ada")
        assert Nickname.check_result(previous) is previous

    def test_check_success_returns_marker(self) -> None:
        assert Nickname.check_success("ada") == Success(DONE)

    def test_default_hook_accepts_everything(self) -> None:
        assert Anything.from_value(None).value is None
        assert Anything.try_from([]) == (True, Anything.from_value([]))
        assert Anything.make_result(0).is_success

    def test_registered_factory_is_used(self) -> None:
        before = len(factory_calls)
        Counted.from_value(1)
        Counted.try_from(2)
        Counted.make_result(3)
        assert len(factory_calls) == before + 3

    def test_constructor_uses_registered_factory(self) -> None:
        before = len(factory_calls)
        counted = Counted(1)
        assert isinstance(counted, Counted)
        assert counted.value == 1
        assert len(factory_calls) == before + 1

    def test_create_result_returns_instance(self) -> None:
        before = len(factory_calls)
        result = Counted.create_result(5)
        assert result == Success(Counted.from_value(5))
        assert len(factory_calls) == before + 2


class TestInvalidValues:
    """An invalid value is rejected by every entry point in its own way."""

    def test_from_value_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Nickname.from_value("")
        assert exc_info.value.field == "nickname"

    def test_try_from_returns_false_and_none(self) -> None:
        assert Nickname.try_from("") == (False, None)

    def test_make_result_returns_failure(self) -> None:
        result = Nickname.make_result("")
        assert isinstance(result, Failure)
        error = result.unwrap_error()
        assert isinstance(error, Error)
        assert error.kind is ErrorKind.VALIDATION
        assert error.description == "Nickname cannot be empty"
        assert error.metadata["field"] == "nickname"

    def test_check_success_returns_failure(self) -> None:
        assert Nickname.check_success("").is_failure

    def test_check_result_replaces_invalid_success(self) -> None:
        result = Nickname.check_result(Success(""))
        assert result.is_failure
        assert result.unwrap_error().description == "Nickname cannot be empty"

    def test_check_result_propagates_failure_untouched(self) -> None:
        previous = Failure(Error.validation("Upstream.Failed", "upstream failed"))
        assert Nickname.check_result(previous) is previous

    @pytest.mark.parametrize("value", [-1, 0, 50, 100, 101])
    def test_all_conventions_agree(self, value: int) -> None:
        try:
            Percentage.from_value(value)
            raised = False
        except ValidationError:
            raised = True

        ok, instance = Percentage.try_from(value)
        assert ok is not raised
        assert (instance is None) is raised
        assert Percentage.make_result(value).is_failure is raised
        assert Percentage.check_success(value).is_failure is raised

    def test_unexpected_fault_propagates_from_raising_path(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            Exploding.from_value("x")

    def test_unexpected_fault_is_contained(self) -> None:
        assert Exploding.try_from("x") == (False, None)
        error = Exploding.make_result("x").unwrap_error()
        assert error.kind is ErrorKind.UNEXPECTED
        assert error.metadata["exception"] == "RuntimeError"

    def test_type_error_in_hook_is_contained(self) -> None:
        assert Percentage.try_from("fifty") == (False, None)  # type: ignore[arg-type]
        assert Percentage.make_result("fifty").is_failure  # type: ignore[arg-type]

    def test_broken_factory(self) -> None:
        with pytest.raises(ConstructionError):
            Broken.from_value(1)
        with pytest.raises(ConstructionError):
            Broken(1)
        assert Broken.try_from(1) == (False, None)
        assert Broken.make_result(1).unwrap_error().kind is ErrorKind.UNEXPECTED


class TestEquality:
    def test_equal_values(self) -> None:
        assert Nickname.from_value("ada") == Nickname.from_value("ada")
        assert not (Nickname.from_value("ada") != Nickname.from_value("ada"))

    def test_different_values(self) -> None:
        assert Nickname.from_value("ada") != Nickname.from_value("bob")

    def test_different_types_with_same_value(self) -> None:
        assert Anything.from_value(5) != Percentage.from_value(5)

    def test_not_equal_to_raw_value(self) -> None:
        assert Nickname.from_value("ada") != "ada"

    def test_equals_with_absent_values(self) -> None:
        ada = Nickname.from_value("ada")
        assert equals(None, None) is True
        assert equals(ada, None) is False
        assert equals(None, ada) is False
        assert equals(ada, Nickname.from_value("ada")) is True

    def test_failed_try_from_results_compare_equal(self) -> None:
        _, first = Nickname.try_from("")
        _, second = Nickname.try_from("")
        assert equals(first, second)

    def test_hash_derived_from_value(self) -> None:
        nickname = Nickname.from_value("ada")
        assert hash(nickname) == hash("ada")
        assert value_hash(nickname) == hash(nickname)
        assert hash(Nickname.from_value("ada")) == hash(Nickname.from_value("ada"))

    def test_usable_in_sets(self) -> None:
        names = {Nickname.from_value("ada"), Nickname.from_value("ada"), Nickname.from_value("bob")}
        assert len(names) == 2


class TestImmutability:
    def test_cannot_assign(self) -> None:
        nickname = Nickname.from_value("ada")
        with pytest.raises(AttributeError):
            nickname.value = "bob"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            nickname._value = "bob"  # type: ignore[misc]

    def test_cannot_delete(self) -> None:
        nickname = Nickname.from_value("ada")
        with pytest.raises(AttributeError):
            del nickname._value

    def test_reinitializing_keeps_value(self) -> None:
        nickname = Nickname.from_value("ada")
        nickname.__init__("bob")  # type: ignore[misc]
        assert nickname.value == "ada"

    def test_revalidation_never_fails(self) -> None:
        for value in [0, 1, 99, 100]:
            assert Percentage.from_value(value).is_valid()

    def test_copy_and_pickle(self) -> None:
        nickname = Nickname.from_value("ada")
        assert copy.copy(nickname) == nickname
        assert copy.deepcopy(nickname) == nickname
        assert pickle.loads(pickle.dumps(nickname)) == nickname


class TestConversions:
    def test_str(self) -> None:
        assert str(Percentage.from_value(42)) == "42"

    def test_repr(self) -> None:
        assert repr(Nickname.from_value("ada")) == "Nickname('ada')"

    def test_to_primitive(self) -> None:
        assert Percentage.from_value(42).to_primitive() == 42


class Profile(pydantic.BaseModel):
    nickname: Nickname
    progress: Percentage | None = None


class TestPydanticFields:
    def test_validates_raw_input(self) -> None:
        profile = Profile(nickname="ada", progress=40)
        assert profile.nickname == Nickname.from_value("ada")
        assert profile.progress == Percentage.from_value(40)

    def test_optional_field(self) -> None:
        assert Profile(nickname="ada").progress is None

    def test_accepts_instances(self) -> None:
        nickname = Nickname.from_value("ada")
        assert Profile(nickname=nickname).nickname is nickname

    def test_rejects_invalid_input(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="Nickname cannot be empty"):
            Profile(nickname="")

    def test_serializes_raw_value(self) -> None:
        profile = Profile(nickname="ada", progress=40)
        assert profile.model_dump() == {"nickname": "ada", "progress": 40}

    def test_json_schema_uses_wrapped_type(self) -> None:
        schema = Profile.model_json_schema()
        assert schema["properties"]["nickname"]["type"] == "string"
        assert {"type": "integer"} in schema["properties"]["progress"]["anyOf"]
        assert schema["required"] == ["nickname"]

    def test_json_schema_for_untyped_value(self) -> None:
        class Bag(pydantic.BaseModel):
            content: Anything

        assert "content" in Bag.model_json_schema()["properties"]
