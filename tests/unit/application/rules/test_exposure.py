"""Tests for application/rules/exposure.py."""

import pytest

from archrule.application.rules.exposure import ModelExposureRule, find_exposed_type
from archrule.domain.model.configuration import RuleConfig
from archrule.domain.model.enums import ViolationKind
from tests.factories import SCENARIO_MODEL_TYPES, make_candidate

MARKERS = ("Response", "DTO")


class TestReferenceScenarios:
    """Return types of typical use-case methods."""

    def test_direct_entity_exposed(self) -> None:
        assert find_exposed_type("UserEntity", SCENARIO_MODEL_TYPES, MARKERS) == "UserEntity"

    def test_list_of_responses_allowed(self) -> None:
        assert find_exposed_type("list[UserListResponse]", SCENARIO_MODEL_TYPES, MARKERS) is None

    def test_result_wrapping_entity_exposed(self) -> None:
        assert (
            find_exposed_type("Result[OrderEntity, Error]", SCENARIO_MODEL_TYPES, MARKERS)
            == "OrderEntity"
        )

    def test_value_object_exposed(self) -> None:
        assert (
            find_exposed_type("MoneyValueObject", SCENARIO_MODEL_TYPES, MARKERS)
            == "MoneyValueObject"
        )

    def test_response_allowed(self) -> None:
        assert find_exposed_type("ProductResponse", SCENARIO_MODEL_TYPES, MARKERS) is None


class TestMatching:
    """Identifier and word-boundary matching."""

    def test_exact_model_name(self) -> None:
        assert find_exposed_type("Entity", ("Entity",), MARKERS) == "Entity"

    @pytest.mark.parametrize("signature", ["Entityish", "Modeling", "int", "str", "list[str]"])
    def test_no_match(self, signature: str) -> None:
        assert find_exposed_type(signature, SCENARIO_MODEL_TYPES, MARKERS) is None

    def test_dotted_reference(self) -> None:
        assert find_exposed_type("domain.UserEntity", ("Entity",), MARKERS) == "UserEntity"

    def test_optional_entity(self) -> None:
        assert find_exposed_type("UserEntity | None", ("Entity",), MARKERS) == "UserEntity"

    def test_forward_reference(self) -> None:
        assert find_exposed_type("'UserEntity'", ("Entity",), MARKERS) == "UserEntity"

    def test_model_types_in_configured_order(self) -> None:
        signature = "tuple[UserModel, UserEntity]"
        assert find_exposed_type(signature, ("Entity", "Model"), MARKERS) == "UserEntity"
        assert find_exposed_type(signature, ("Model", "Entity"), MARKERS) == "UserModel"

    def test_literal_values_ignored(self) -> None:
        assert find_exposed_type("Literal['UserEntity']", ("Entity",), MARKERS) is None

    def test_qualified_literal_values_ignored(self) -> None:
        signature = "typing.Literal['UserEntity', 'OrderEntity']"
        assert find_exposed_type(signature, ("Entity",), MARKERS) is None

    def test_annotated_metadata_ignored(self) -> None:
        assert find_exposed_type("Annotated[int, 'UserEntity']", ("Entity",), MARKERS) is None

    def test_annotated_type_still_checked(self) -> None:
        signature = "Annotated[UserEntity, 'cached']"
        assert find_exposed_type(signature, ("Entity",), MARKERS) == "UserEntity"

    def test_annotated_metadata_does_not_exempt(self) -> None:
        signature = "Annotated[UserEntity, 'Response']"
        assert find_exposed_type(signature, ("Entity",), MARKERS) == "UserEntity"

    def test_unparsable_signature_matched_as_text(self) -> None:
        assert find_exposed_type("Result[UserEntity", ("Entity",), MARKERS) == "UserEntity"

    def test_blank_signature(self) -> None:
        assert find_exposed_type("", ("Entity",), MARKERS) is None


class TestExemption:
    """Exemption markers only clear their own sub-signature."""

    def test_dto_allowed(self) -> None:
        assert find_exposed_type("UserDTO", ("Entity",), MARKERS) is None

    def test_marker_in_sibling_argument_does_not_exempt(self) -> None:
        assert (
            find_exposed_type("Result[UserEntity, ErrorResponse]", ("Entity",), MARKERS)
            == "UserEntity"
        )

    def test_marker_on_wrapper_does_not_hide_argument(self) -> None:
        assert (
            find_exposed_type("PagedResponse[UserEntity]", ("Entity",), MARKERS) == "UserEntity"
        )

    def test_marker_in_same_leaf_exempts(self) -> None:
        assert find_exposed_type("Result[UserEntity, ErrorResponse", ("Entity",), MARKERS) is None

    def test_entity_named_response_not_exempt(self) -> None:
        assert find_exposed_type("ResponseEntity", ("Entity",), MARKERS) == "ResponseEntity"

    def test_no_markers(self) -> None:
        assert find_exposed_type("UserEntityResponse", ("Response",), ()) == "UserEntityResponse"


class TestModelExposureRule:
    """Tests for ModelExposureRule."""

    def test_kind(self) -> None:
        assert ModelExposureRule.kind == ViolationKind.EXPOSED_MODEL

    def test_violation_fields(self) -> None:
        candidate = make_candidate("UserEntity", line=7)
        violation = ModelExposureRule().evaluate(candidate, RuleConfig.default())

        assert violation is not None
        assert violation.use_case_name == "GetUserUseCase"
        assert violation.method_name == "execute"
        assert violation.exposed_type == "UserEntity"
        assert violation.return_signature == "UserEntity"
        assert violation.location == candidate.location
        assert violation.message == (
            "UseCase 'GetUserUseCase' exposes model object 'UserEntity' in method 'execute'"
        )

    def test_compliant_candidate(self) -> None:
        candidate = make_candidate("list[UserListResponse]")
        assert ModelExposureRule().evaluate(candidate, RuleConfig.default()) is None

    def test_custom_model_types(self) -> None:
        config = RuleConfig(model_types=("TestModel",))
        rule = ModelExposureRule()
        assert rule.evaluate(make_candidate("UserEntity"), config) is None
        violation = rule.evaluate(make_candidate("TestModel"), config)
        assert violation is not None
        assert violation.exposed_type == "TestModel"

    def test_idempotent(self) -> None:
        rule = ModelExposureRule()
        candidate = make_candidate("Result[OrderEntity, Error]")
        config = RuleConfig.default()
        assert rule.evaluate(candidate, config) == rule.evaluate(candidate, config)
