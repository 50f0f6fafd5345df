"""
Property Fetching

Modules:
    fetcher: PropertyFetcher (one remote batch per kind per wave)
    relations: Relation and NamedReferences listers for descriptors
"""

from vsphere_fs.fetch.fetcher import FetchResult, PropertyFetcher, PropertyPaths
from vsphere_fs.fetch.relations import NamedReferences, Relation

__all__ = ["FetchResult", "NamedReferences", "PropertyFetcher", "PropertyPaths", "Relation"]
