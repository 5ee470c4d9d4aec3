"""Architectural boundary tests using pytest-archon.

- Domain layer has no dependencies on application or adapters
- Application services don't depend on adapters
"""

from pytest_archon import archrule


def test_domain_has_no_outward_dependencies() -> None:
    """Domain models and errors should not import application or adapter modules."""
    (
        archrule("domain", comment="Domain should be independent")
        .match("nmeta.domain*")
        .should_not_import("nmeta.adapters*")
        .should_not_import("nmeta.application*")
        .should_not_import("nmeta.cli")
        .check("nmeta", only_direct_imports=True)
    )


def test_domain_does_not_import_web_framework() -> None:
    """Domain should not depend on Starlette."""
    (
        archrule("domain framework", comment="Domain should be framework-free")
        .match("nmeta.domain*")
        .should_not_import("starlette*")
        .should_not_import("pydantic_settings*")
        .check("nmeta", only_direct_imports=True)
    )


def test_application_does_not_import_adapters() -> None:
    """Application services should only depend on the domain."""
    (
        archrule("application", comment="Application should not depend on adapters")
        .match("nmeta.application*")
        .should_not_import("nmeta.adapters*")
        .should_not_import("nmeta.cli")
        .check("nmeta", only_direct_imports=True)
    )


def test_config_adapter_doesnt_import_application() -> None:
    """Configuration adapters should only build domain configuration."""
    (
        archrule("config independence", comment="Config should not depend on application")
        .match("nmeta.adapters.config*")
        .should_not_import("nmeta.application*")
        .should_not_import("nmeta.adapters.web*")
        .may_import("nmeta.domain*")
        .check("nmeta", only_direct_imports=True)
    )


def test_cli_dont_import_web_adapters() -> None:
    """CLI should not import web adapters to allow running CLI without Starlette."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("nmeta.cli")
        .should_not_import("nmeta.adapters.web*")
        .may_import("nmeta.domain*")
        .may_import("nmeta.application*")
        .may_import("nmeta.adapters.config*")
        .check("nmeta", only_direct_imports=True)
    )
