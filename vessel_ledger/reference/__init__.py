"""Reference layer package for product conversion and contract tables."""

from .contracts import (
	reference_contract_size,
	reference_contracts_to_volume,
	reference_conversion_factor,
	reference_overcoverage,
	reference_price_unit,
	reference_supports_contracts,
	reference_volume_to_contracts,
)

__all__ = [
	"reference_contract_size",
	"reference_contracts_to_volume",
	"reference_conversion_factor",
	"reference_overcoverage",
	"reference_price_unit",
	"reference_supports_contracts",
	"reference_volume_to_contracts",
]
