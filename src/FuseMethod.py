import errno
import logging

# Wrap a fuse callback so errors come back to the kernel as -errno instead of as Python exceptions.
# NotFound is an IOError, so rejected writes and unknown paths land in the first branch.
def FuseMethod(func):
	def wrapper(*a, **kw):
		try:
			return func(*a, **kw)
		except (IOError, OSError) as e:
			logging.debug(f"Failed operation {func.__name__}", exc_info=True)

			if hasattr(e, 'errno') and isinstance(e.errno, int):
				# Standard operation
				return -e.errno
			return -errno.EACCES

		except Exception:
			logging.warning(f"Unexpected exception in {func.__name__}", exc_info=True)
			return -errno.EIO

	wrapper.__name__ = func.__name__
	wrapper.__doc__ = func.__doc__
	return wrapper
