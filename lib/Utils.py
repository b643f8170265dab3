import posixpath


# Normalize a path handed in by the transport into a universal path: no leading slash, no '.' or '..' segments.
def upath(path):
	path = posixpath.normpath("/" + (path or ""))
	return path.lstrip("/")


# RETURNS the components of *path*, root first. The root itself has none.
def split_upath(path):
	path = upath(path)
	if (not path):
		return []
	return path.split("/")

