"""Investment instrument rate table"""

from typing import Dict, Iterator, List, Mapping, Optional

from savings_planner.domain.models import RateTableEntry


class RateTable:
    """Ordered, read-only set of instruments keyed by instrument id"""

    def __init__(self, entries: List[RateTableEntry]):
        self._entries: Dict[str, RateTableEntry] = {entry.key: entry for entry in entries}

    def __iter__(self) -> Iterator[RateTableEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def keys(self) -> List[str]:
        return list(self._entries)

    def get(self, key: str) -> RateTableEntry:
        return self._entries[key]

    def effective_rate(self, key: str, custom_rates: Optional[Mapping[str, float]] = None) -> float:
        """
        Rate to project an instrument with.

        A caller override wins only when present and non-zero; a zero or missing
        override falls back to the table default.
        """
        if custom_rates and custom_rates.get(key):
            return custom_rates[key]
        return self._entries[key].default_rate

    def with_defaults(self, overrides: Mapping[str, float]) -> "RateTable":
        """
        Copy of the table with replaced default rates.

        Unknown keys are ignored. Each replaced entry is re-validated, so an
        override outside [min_rate, max_rate] raises InvalidRateTableError.
        """
        entries = []
        for entry in self:
            if entry.key in overrides:
                entry = RateTableEntry(
                    key=entry.key,
                    display_name=entry.display_name,
                    default_rate=overrides[entry.key],
                    min_rate=entry.min_rate,
                    max_rate=entry.max_rate,
                )
            entries.append(entry)
        return RateTable(entries)


DEFAULT_RATE_TABLE = RateTable(
    [
        RateTableEntry("ppf", "PPF", default_rate=7.5, min_rate=7.0, max_rate=8.0),
        RateTableEntry("fd", "Fixed Deposit", default_rate=6.5, min_rate=6.0, max_rate=7.0),
        RateTableEntry("rd", "Recurring Deposit", default_rate=6.5, min_rate=6.0, max_rate=7.0),
        RateTableEntry("mutual_funds", "Mutual Funds", default_rate=11.0, min_rate=10.0, max_rate=12.0),
        RateTableEntry("nifty_etf", "Nifty ETF", default_rate=11.0, min_rate=10.0, max_rate=12.0),
        RateTableEntry("gold_etf", "Gold ETF", default_rate=5.5, min_rate=5.0, max_rate=6.0),
        RateTableEntry("sgb", "Sovereign Gold Bond", default_rate=5.5, min_rate=5.0, max_rate=6.0),
    ]
)
