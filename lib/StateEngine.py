"""
lib/StateEngine.py

Purpose:
Owns the vitality counters of every kitty: what each file renders right now, and how a write moves the counter.

Place in Architecture:
Serves the read, getattr and write operations of KittyFS. Rendering is recomputed on every call and never stored, because any write can change it.
The journal file is the exception to "a file renders itself". It renders a census of all the other files instead.

Interface:

	__init__(table, journal, greeting): Binds the engine to an InodeTable.
	IsJournal(file): True for files carrying the reserved journal name.
	Census(): RETURNS {'needing', 'at_peace', 'mad'} counts over all non-journal files.
	Render(file): RETURNS the current content of *file* as bytes.
	Size(file): RETURNS len(Render(file)).
	Slice(file, offset, size): RETURNS the clamped byte range of the current content.
	Pet(file, payload): Applies a write. RETURNS the number of bytes accepted.

TODOs/FIXMEs:
None.
"""

import logging

from .fs.common.Vitality import Vitality
from .fs.common.Errors import NotFound
from .TreeBuilder import DEFAULT_JOURNAL
from .Templates import *

# The only payloads a kitty understands.
PET_TOKENS = ("pets", "pets\n")


class StateEngine(object):
	def __init__(this, table, journal=DEFAULT_JOURNAL, greeting=DEFAULT_GREETING):
		this.table = table
		this.journal = journal
		this.greeting = greeting

	def IsJournal(this, file):
		return file.name == this.journal

	# Count every kitty by state. The journal(s) never count themselves.
	def Census(this):
		ret = {
			'needing': 0,
			'at_peace': 0,
			'mad': 0,
		}
		for file in this.table.Files():
			if (this.IsJournal(file)):
				continue
			state = file.state
			if (state is Vitality.NEEDING):
				ret['needing'] += 1
			elif (state is Vitality.AT_PEACE):
				ret['at_peace'] += 1
			else:
				ret['mad'] += 1
		return ret

	def RenderText(this, file):
		if (this.IsJournal(file)):
			return JournalReport(this.Census())

		state = file.state
		if (state is Vitality.NEEDING):
			return NeedsPets(file.template, file.remaining, this.greeting)
		if (state is Vitality.AT_PEACE):
			return AtPeace(file.template, this.greeting)
		return Mad(file.template, this.greeting)

	def Render(this, file):
		return this.RenderText(file).encode('utf-8')

	# Computed the same way as Render, so getattr and read always agree.
	def Size(this, file):
		return len(this.Render(file))

	# RETURNS at most *size* bytes of the current content, starting at *offset*.
	# Reading at or past the end is not an error; it simply yields nothing.
	def Slice(this, file, offset, size):
		content = this.Render(file)
		offset = max(int(offset), 0)
		if (offset >= len(content)):
			return b""
		return content[offset:offset + max(int(size), 0)]

	# Pet a kitty.
	# The payload must decode as UTF-8 to one of PET_TOKENS. A kitty that is already mad refuses any more pets.
	# Either the whole payload is accepted and the counter drops by one, or NotFound is raised and nothing changes.
	# RETURNS the number of bytes written.
	def Pet(this, file, payload):
		if (this.IsJournal(file)):
			logging.info(f"Refusing write to journal {file.name} ({file.id})")
			raise NotFound(f"{file.name} cannot be petted")

		try:
			text = payload if isinstance(payload, str) else bytes(payload).decode('utf-8')
		except UnicodeDecodeError:
			logging.info(f"Refusing undecodable write of {len(payload)} bytes to {file.name} ({file.id})")
			raise NotFound(f"{file.name} only understands pets")

		if (text not in PET_TOKENS):
			logging.info(f"Refusing write {text!r} to {file.name} ({file.id})")
			raise NotFound(f"{file.name} only understands pets")

		if (file.state is Vitality.MAD):
			logging.info(f"{file.name} ({file.id}) is mad and refuses to be petted")
			raise NotFound(f"{file.name} does not want any more pets")

		file.vitality -= 1
		logging.info(f"Petted {file.name} ({file.id}); vitality is now {file.vitality} ({file.state})")
		return len(text.encode('utf-8'))
