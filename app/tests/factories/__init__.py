"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog_config,
    make_config_mapping,
    make_mo_file,
    make_multi_domain_config,
    make_po_file,
    make_view_tree,
)

__all__ = [
    "make_catalog_config",
    "make_config_mapping",
    "make_mo_file",
    "make_multi_domain_config",
    "make_po_file",
    "make_view_tree",
]
