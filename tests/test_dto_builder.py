"""Tests for the dto_builder module."""

from dtogen.document import SchemaNode
from dtogen.dto_builder import build_dto_model, build_dto_models


class TestBuildDtoModel:
    """Test a single DTO model."""

    def test_fields_keep_property_order(self, document, config):
        model = build_dto_model("Pet", document.schemas["Pet"], False, config)
        assert [f.name for f in model.fields] == ["id", "name", "birthday", "tags", "owner"]

    def test_field_types(self, document, config):
        model = build_dto_model("Pet", document.schemas["Pet"], False, config)
        types = {f.name: f.resolved_type.type_name for f in model.fields}
        assert types == {
            "id": "Long",
            "name": "String",
            "birthday": "LocalDate",
            "tags": "List<String>",
            "owner": "User",
        }

    def test_imports_deduplicated(self, config):
        schema = SchemaNode.model_validate({
            "properties": {
                "a": {"type": "array", "items": {"type": "string"}},
                "b": {"type": "array", "items": {"type": "integer"}},
                "c": {"type": "string", "format": "date"},
            },
        })
        model = build_dto_model("Thing", schema, False, config)
        assert model.imports == {"java.util.List", "java.time.LocalDate"}

    def test_descriptions_carried(self, document, config):
        model = build_dto_model("Pet", document.schemas["Pet"], False, config)
        assert model.description == "A pet"
        assert model.fields[1].description == "Pet name"
        assert model.fields[1].base_name == "name"

    def test_no_properties_gives_empty_fields(self, document, config):
        model = build_dto_model("User", document.schemas["User"], False, config)
        assert model.fields == ()
        assert model.imports == frozenset()

    def test_request_variant_package(self, document, config):
        model = build_dto_model("Pet", document.schemas["Pet"], False, config)
        assert model.package_name == "com.example.dto.RequestDTO"
        assert model.is_response_variant is False

    def test_forced_response_variant(self, document, config):
        model = build_dto_model("Pet", document.schemas["Pet"], True, config)
        assert model.package_name == "com.example.dto.ResponseDTO"
        assert model.is_response_variant is True

    def test_response_suffix_implies_response_variant(self, document, config):
        model = build_dto_model("PetResponseDTO", document.schemas["PetResponseDTO"], False, config)
        assert model.is_response_variant is True

    def test_dump_sorts_imports(self, document, config):
        model = build_dto_model("Order", document.schemas["Order"], False, config)
        dumped = model.model_dump()
        assert dumped["imports"] == ["java.time.LocalDateTime"]
        assert dumped["fields"][0]["resolved_type"]["type_name"] == "LocalDateTime"


class TestBuildDtoModels:
    """Test the per-document driver."""

    def test_response_dto_schema_yields_one_model(self, document, config):
        models = [m for m in build_dto_models(document.schemas, config) if m.class_name == "PetResponseDTO"]
        assert len(models) == 1
        assert models[0].is_response_variant

    def test_plain_schema_yields_request_and_response(self, document, config):
        models = [m for m in build_dto_models(document.schemas, config) if m.class_name == "Pet"]
        assert [m.is_response_variant for m in models] == [False, True]
        assert models[0].fields == models[1].fields
        assert models[0].package_name != models[1].package_name

    def test_total_count(self, document, config):
        # Pet, Order, User -> 2 each; PetResponseDTO -> 1
        assert len(build_dto_models(document.schemas, config)) == 7

    def test_custom_base_package(self, document):
        from dtogen.config import GeneratorConfig

        models = build_dto_models(document.schemas, GeneratorConfig(base_package="org.acme"))
        assert models[0].package_name == "org.acme.dto.RequestDTO"
