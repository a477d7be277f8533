"""Batch creation and update of the catalog tree.

Provisioning runs offline (deploy or maintenance time) and must not run
concurrently with another provisioning call on the same tree.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from gettext_catalogs.i18n.exceptions import (
    CatalogError,
    DirectoryNotFoundError,
    UndefinedDomainError,
)
from gettext_catalogs.i18n.filesystem import CatalogFileSystem
from gettext_catalogs.logging import get_module_logger

logger = get_module_logger()


@dataclass
class ProvisioningReport:
    """Outcome of a provisioning batch.

    Attributes:
        created: Locale directories created by ``create``.
        added: Locales whose tree was added by ``update``.
        updated: (locale, domain) catalogs whose header was rewritten.
        failed: (locale, domain, error) for each failure recorded when
            errors do not stop the batch; domain is None for locale-level
            failures.
    """

    created: List[Path] = field(default_factory=list)
    added: List[str] = field(default_factory=list)
    updated: List[Tuple[str, str]] = field(default_factory=list)
    failed: List[Tuple[str, Optional[str], str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class CatalogProvisioner:
    """Creates the catalog tree and keeps catalog headers in sync.

    Usage:
        provisioner = CatalogProvisioner(filesystem)
        provisioner.create()
        report = provisioner.update(domain="frontend")
    """

    def __init__(self, filesystem: CatalogFileSystem):
        self.filesystem = filesystem
        self.configuration = filesystem.configuration

    def create(self) -> ProvisioningReport:
        """Create the catalog root and every missing locale tree.

        Raises:
            FileCreationError: If a directory or catalog cannot be created.
            DirectoryNotFoundError: If a domain's view sources are missing.
        """
        report = ProvisioningReport(created=self.filesystem.generate_locales())
        logger.info("catalogs_created", created_count=len(report.created))
        return report

    def update(
        self, domain: Optional[str] = None, continue_on_error: bool = False
    ) -> ProvisioningReport:
        """Add missing locales and rewrite the header of existing catalogs.

        Args:
            domain: Only update this domain's catalogs; every domain when None.
            continue_on_error: Record catalog errors in the report and keep
                going instead of raising.

        Raises:
            DirectoryNotFoundError: If the catalog root does not exist.
            UndefinedDomainError: If ``domain`` is not configured.
            CatalogError: The first failure when ``continue_on_error`` is False.
        """
        domain_path = self.filesystem.domain_path()
        if not domain_path.exists():
            raise DirectoryNotFoundError(
                f"Missing catalog directory {domain_path}, create the catalogs first"
            )

        all_domains = self.configuration.get_all_domains()
        if domain is not None and domain not in all_domains:
            raise UndefinedDomainError(f"Domain '{domain}' is not registered.")
        domains = [domain] if domain is not None else all_domains

        report = ProvisioningReport()
        for locale in self.configuration.supported_locales:
            locale_path = self.filesystem.domain_path(locale)

            if not locale_path.exists():
                try:
                    self.filesystem.add_locale(locale_path, locale)
                except CatalogError as e:
                    self._record_failure(report, locale, None, e, continue_on_error)
                    continue
                report.added.append(locale)
                logger.info("locale_added", locale=locale, path=str(locale_path))
                continue

            for current_domain in domains:
                try:
                    self.filesystem.update_locale(locale_path, locale, current_domain)
                except CatalogError as e:
                    self._record_failure(report, locale, current_domain, e, continue_on_error)
                    continue
                report.updated.append((locale, current_domain))

        logger.info(
            "catalogs_updated",
            added_count=len(report.added),
            updated_count=len(report.updated),
            failed_count=len(report.failed),
        )
        return report

    def _record_failure(
        self,
        report: ProvisioningReport,
        locale: str,
        domain: Optional[str],
        error: CatalogError,
        continue_on_error: bool,
    ) -> None:
        logger.error("catalog_update_failed", locale=locale, domain=domain, error=str(error))
        if not continue_on_error:
            raise error
        report.failed.append((locale, domain, str(error)))
