"""Contract adapters of the IQ Space protocol."""

from .base import Adapter
from .listing_manager import ListingManagerAdapter
from .listing_wizard import ListingWizardAdapterV1
from .metahub import MetahubAdapter
from .renting_manager import RentingManagerAdapter
from .universe_registry import UniverseRegistryAdapter
from .universe_wizard import UniverseWizardAdapterV1
from .warper_manager import WarperManagerAdapter
from .warper_preset_factory import WarperPresetFactoryAdapter
from .warper_wizard import WarperWizardAdapterV1

__all__ = [
    "Adapter",
    "ListingManagerAdapter",
    "ListingWizardAdapterV1",
    "MetahubAdapter",
    "RentingManagerAdapter",
    "UniverseRegistryAdapter",
    "UniverseWizardAdapterV1",
    "WarperManagerAdapter",
    "WarperPresetFactoryAdapter",
    "WarperWizardAdapterV1",
]
