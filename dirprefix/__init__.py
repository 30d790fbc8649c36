"""dirprefix - Prefix directory entries with a part of the directory name."""
