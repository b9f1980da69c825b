"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_catalog_schema(self):
        from workshop_availability.schemas.catalog_schema import (
            Bay, JobKind, WorkingHours, Workshop, WorkshopConfig,
        )
        assert JobKind.SERVICE == "service"
        assert JobKind.REPAIR == "repair"

    def test_import_availability_schema(self):
        from workshop_availability.schemas.availability_schema import (
            AvailabilityRequest, AvailabilityResponse, AvailableSlot, ErrorResponse,
        )
        request = AvailabilityRequest(services=["MOT"], repairs=[])
        assert request.start_date is None


class TestAvailabilityImports:
    def test_import_availability_package(self):
        from workshop_availability.availability import (
            HORIZON_DAYS,
            AvailabilityError,
            EmptyScheduleError,
            SlotCollector,
            build_job_order,
            check_capabilities,
            compute_availability,
            schedule_jobs,
        )
        assert HORIZON_DAYS == 60
        assert issubclass(EmptyScheduleError, AvailabilityError)
        assert len(SlotCollector()) == 0

    def test_import_catalog_package(self):
        from workshop_availability.catalog import (
            WorkshopConfigError, get_workshop_config, load_workshop_config, reset_cache,
        )
        assert callable(get_workshop_config)


class TestApiImports:
    def test_import_app(self):
        from workshop_availability.api.app import app, create_app
        assert app.url_path_for("health") == "/health"
        assert app.url_path_for("availability") == "/api/availability"

    def test_import_validation(self):
        from workshop_availability.api import validate_availability_request
        assert callable(validate_availability_request)

    def test_import_lambda_handler(self):
        from workshop_availability.api.lambda_handler import handler
        assert callable(handler)


class TestConfigImport:
    def test_import_config(self):
        from workshop_availability.config import settings
        assert settings.service_name
        assert 1 <= settings.server.port <= 65535
        assert settings.catalog.path


class TestEntryPoint:
    def test_main_parser_has_commands(self):
        from main import build_parser
        args = build_parser().parse_args(["query", "--services", "MOT"])
        assert args.command == "query"
        assert args.services == ["MOT"]
        assert args.repairs == []
