"""
lib/fs/common/Vitality.py

Purpose:
Defines the states a kitty can be in, derived from its vitality counter.

Place in Architecture:
Used by the StateEngine to pick a content variant and to tally the journal report.

Interface:

	Enum members: NEEDING, AT_PEACE and MAD.
	Vitality.Of(counter): classify a counter.

TODOs/FIXMEs:
None.
"""

from enum import Enum

# A kitty needs pets while its counter is positive, is happy at exactly zero and gets mad once petted past zero.
# Mad is terminal: writes are refused from then on, so nothing can bring the counter back up.
class Vitality(Enum):
	NEEDING = 0
	AT_PEACE = 1
	MAD = 2

	@classmethod
	def Of(cls, counter):
		if (counter > 0):
			return cls.NEEDING
		if (counter == 0):
			return cls.AT_PEACE
		return cls.MAD

	def __str__(self):
		return self.name
