"""Gzip helpers and tar.gz bundling of files and directories."""