"""Due-date text resolution and formatting.

The core is pure: text + today (+ the previous resolved date for ranges) in,
canonical string out. Document discovery/rendering lives in `duedate_formatter.page`.
"""

from .types import RELATIVE_DAYS, WEEKDAYS, ParseOutcome, PassThrough, ResolvedDate, ScanEntry, ScanToken
from .parsers import resolve
from .format import format_outcome
from .scan import RANGE_SEPARATOR, scan, scan_entries
