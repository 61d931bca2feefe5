"""Type hints used in Court Plan."""

from datetime import date, time
from typing import Dict, List, Optional, Tuple, Union

# Opaque player identifier assigned by the roster manager
PlayerId = str
MaybePlayerId = Optional[PlayerId]

# Two partnered player ids, in roster order
Partnership = Tuple[PlayerId, PlayerId]

# One record from an external player list: {"name": ..., "gender": ...}
ImportRecord = Dict[str, str]
ImportRecords = List[ImportRecord]

# Date and time fields accept parsed values or their ISO text
DateInput = Union[date, str, None]
TimeInput = Union[time, str, None]

#  LocalWords:  PlayerId
