"""Virtual memory simulator: page-table translation over a small RAM with a swap store."""

__version__ = "0.1.0"
__all__ = ["constants", "physical", "virtual", "cli"]