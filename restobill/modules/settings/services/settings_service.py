# restobill/modules/settings/services/settings_service.py

"""
Store settings: the singleton read by billing on every recompute.

Only this service writes it, and always as a whole document.
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from restobill.core.exceptions import ValidationError
from restobill.modules.store.services.document_store import Collections, DocumentStore
from ..schemas.settings_schemas import (
    SETTINGS_DOCUMENT_ID,
    StoreSettings,
    StoreSettingsUpdate,
)

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def merge(self, current: StoreSettings, changes: StoreSettingsUpdate) -> StoreSettings:
        """
        Apply a partial change on top of ``current``.

        Raises:
            ValidationError: merged settings are invalid
        """
        merged = current.model_dump()
        merged.update(changes.model_dump(exclude_unset=True, exclude_none=True))
        try:
            return StoreSettings.model_validate(merged)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid store settings: {e.errors()[0]['msg']}")

    async def save_settings(self, settings: StoreSettings) -> StoreSettings:
        await self.store.save(
            Collections.SETTINGS, SETTINGS_DOCUMENT_ID, settings.to_document()
        )
        logger.info(
            f"Store settings saved: gst={settings.gst_rate}%, "
            f"service={settings.service_charge_rate}%"
        )
        return settings

    async def update_settings(
        self, current: StoreSettings, changes: StoreSettingsUpdate
    ) -> StoreSettings:
        """Validate and persist a settings change"""
        return await self.save_settings(self.merge(current, changes))
