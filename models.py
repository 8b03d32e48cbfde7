"""Data models for the grape study sheet."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Grape:
    """One grape/region row of the dataset, with delimited fields split."""
    order: int
    name: str
    climate: tuple = ()
    acidity: tuple = ()
    tannins: tuple = ()
    sweetness: tuple = ()
    body: tuple = ()
    flavour: tuple = ()
    oak: str = ""
    aging: tuple = ()
    additional_characteristics: tuple = ()
    country: str = ""              # "France"
    region: str = ""               # "Burgundy"
    regional_characteristics: str = ""

    @property
    def region_key(self):
        """Sort key used by the region views (country and region concatenated)."""
        return self.country + self.region
