import eons
import sys
import logging
import logging.handlers

from libkittyfs import KittyFS, TreeBuilder, DefaultTree

from .Utils import *
from .KittyFuse import KittyFuse, fuse

# KITTYFS builds a KittyFS engine from its arguments and mounts it through fuse.
# Name is caps to make it executable per eons convention.
class KITTYFS(eons.Executor):
	def __init__(this, name="KittyFS"):
		super(KITTYFS, this).__init__(name)

		this.arg.kw.required.append("mount")

		this.arg.kw.optional["xml"] = None # XML document to build the tree from. The built-in tree is used otherwise.
		this.arg.kw.optional["journal"] = "LiveJournal.txt"
		this.arg.kw.optional["pets"] = "5" # Pets each kitty needs before it is at peace.
		this.arg.kw.optional["greeting"] = "Hello StarCon!"
		this.arg.kw.optional["ttl"] = "1" # Entry and attribute cache lifetime (seconds).
		this.arg.kw.optional["log_level"] = "warning"
		this.arg.kw.optional["daemon"] = False

		# Supported FUSE args
		this.arg.kw.optional["multithreaded"] = True
		this.arg.kw.optional["fsname"] = "kittyfs"

	# ValidateArgs is automatically called before Function, per eons.Functor.
	def ValidateArgs(this):
		super().ValidateArgs()

		try:
			this.pets = parse_count(this.pets)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --pets {this.pets} is not a valid number of pets")

		try:
			this.ttl = parse_lifetime(this.ttl)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --ttl {this.ttl} is not a valid lifetime")

		try:
			this.log_level = parse_log_level(this.log_level)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --log-level {this.log_level} is not a valid log level")

		try:
			this.daemon = parse_bool(this.daemon)
			this.multithreaded = parse_bool(this.multithreaded)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --daemon and --multithreaded take true or false")

		if (not this.journal or "/" in this.journal):
			raise eons.MissingArgumentError(f"error: --journal {this.journal} is not a valid file name")

	def SetupLogging(this):
		logger = logging.getLogger('')
		if (not this.daemon):
			# console logging only
			handler = logging.StreamHandler()
			fmt = logging.Formatter(fmt=("%(asctime)s kittyfs[%(process)d]: " +
										 str(this.mount) + " %(levelname)s: %(message)s"))
		else:
			# to syslog
			handler = logging.handlers.SysLogHandler(address='/dev/log')
			fmt = logging.Formatter(fmt=("kittyfs[%(process)d]: " +
										 str(this.mount) + ": %(levelname)s: %(message)s"))

		handler.setFormatter(fmt)
		logger.addHandler(handler)
		logger.setLevel(this.log_level)

	def BuildEngine(this):
		if (this.xml):
			blueprint = TreeBuilder.FromXml(str(this.xml))
		else:
			blueprint = DefaultTree(this.journal)

		return KittyFS.FromBlueprint(
			blueprint,
			vitality=this.pets,
			journal=this.journal,
			greeting=this.greeting,
			ttl=this.ttl
		)

	def Function(this):
		this.SetupLogging()

		this.engine = this.BuildEngine()

		server = KittyFuse(this.engine, version="%prog " + fuse.__version__, dash_s_do='setsingle')
		server.fuse_args.mountpoint = str(this.mount)
		server.fuse_args.add('fsname=' + this.fsname)
		server.fuse_args.add('entry_timeout=' + str(this.engine.ttl))
		server.fuse_args.add('attr_timeout=' + str(this.engine.ttl))
		server.multithreaded = this.multithreaded

		if (not this.daemon):
			server.fuse_args.setmod('foreground')

		logging.info(f"Mounting {len(this.engine.table)} inodes at {this.mount}")
		server.main()


def main():
	KITTYFS()()


if __name__ == '__main__':
	sys.exit(main())
