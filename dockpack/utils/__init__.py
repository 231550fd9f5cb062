"""Tar archive, filesystem and network helpers."""