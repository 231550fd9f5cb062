# dockpack

dockpack is a Python library for packing container images and docker-compose
configurations into compressed bundles, unpacking them again, and for the small pieces a
rootless container setup needs: user and namespace handling, permission checks, container
commands run through the `docker` client, and an HTTP client for a container API.

It targets Linux and needs Python 3.12 or later.

## Installation

```
pip install dockpack
```

To run the test suite, install the test extra and run pytest:

```
pip install "dockpack[test]"
pytest
```

## What is inside

- `dockpack.utils.archive`: `create_tar_archive(source_dir)` returns an uncompressed tar of a
  directory tree as bytes, with names relative to the directory; `extract_tar_archive(tar_data,
  dest_dir)` unpacks directories and regular files from bytes or a binary stream and stops at
  the first entry of any other type.
- `dockpack.utils.fs`: `ensure_dir`, `read_file`, `write_file`, `delete_file`, and
  `iter_files` / `walk_dir`, which visit every non-directory path under a root in lexical
  order without following symbolic links.
- `dockpack.utils.network`: `get_available_port`, `is_private_ip` (RFC 1918 and RFC 4193
  ranges), `parse_cidr` (returns an `ipaddress` network, host bits cleared),
  `get_host_ip` (a non-loopback IPv4 address, or `""`) and `split_host_port`, which accepts
  `host:port` and `[host]:port` and raises `ValueError` on malformed input.
- `dockpack.builder.compression`: `compress`, `decompress`, `save_compressed_file` and
  `load_compressed_file` for gzip data.
- `dockpack.builder.bundler.Bundler`: `bundle_resources(resource_paths, output_path)` writes
  the given files, each under its base name, into a `.tar.gz`.
- `dockpack.builder.packager.Packager`: `package(output, sources)` writes files and whole
  directory trees into a `.tar.gz`; a directory keeps its own name as the top entry.
- `dockpack.embedder.compose`: the `ComposeConfig` and `ServiceConfig` dataclasses,
  `load_compose_file` (reads `version` and each service's `image`, `ports` and `volumes`,
  ignoring other keys) and `save_compose_file` (services sorted by name, empty lists left out).
- `dockpack.embedder.embedder`: `Embedder` holds a compose file and images by name;
  `save_embedded_resources` writes them as gzip-compressed JSON lines, and
  `extract_resources` reads such a file back.
- `dockpack.embedder.images`: `Image` (name and tar bytes) and `load_images(images, root)`,
  which unpacks each image into `root/<name>` (default root `/var/lib/docker/images`).
- `dockpack.engine.image`: `Image`, `load_image` (name and version from the file name:
  `name:version` or `name-version`, otherwise version `latest`), `verify_image`,
  `save_image` (writes placeholder data) and `list_images`.
- `dockpack.engine.runtime.Runtime`: creates its runtime directory; `start` and `stop`
  print a message and set `running`.
- `dockpack.engine.container`: `Container` runs `docker run`, `docker stop` and `docker rm`
  for its ID (default from `generate_container_id`, `container-<pid>`); failures raise
  `ContainerError` with the command's output.
- `dockpack.engine.network.NetworkManager`: creates and deletes its namespace directory,
  exposes `namespace_path` under `/var/run/netns`, and `interface_down` clears the UP flag
  of an interface (`LookupError` if it does not exist).
- `dockpack.rootless.namespace`: `new_namespace` starts a shell under `unshare` in a new
  user namespace; `Namespace.enter` joins the namespace at its path.
- `dockpack.rootless.permissions`: `check_permissions` raises `PermissionDenied` when run as
  root; `has_capability` and `set_user_namespace`.
- `dockpack.rootless.user`: `current_user()` returns a `User` with `username`, `uid`, `gid`
  and `home_dir`.
- `dockpack.api.types`: `Port`, `Container` (with `to_dict` / `from_dict`), `Image`,
  `Network` and `HealthCheck`.
- `dockpack.api.client`: `Client(base_url)` with `list_containers`, `start_container` and
  `stop_container`; unexpected responses raise `ApiError` carrying `status_code`.

## Examples

Bundle some files and read the result back:

```python
from dockpack.builder.bundler import Bundler
from dockpack.builder.compression import load_compressed_file

Bundler().bundle_resources(["app.yaml", "image.tar"], "bundle.tar.gz")
raw_tar = load_compressed_file("bundle.tar.gz")
```

Load and edit a compose file:

```python
from dockpack.embedder.compose import load_compose_file, save_compose_file

config = load_compose_file("docker-compose.yaml")
for name, service in config.services.items():
    print(name, service.image, service.ports)
save_compose_file("docker-compose.out.yaml", config)
```

Read image metadata from a file name:

```python
from dockpack.engine.image import load_image, verify_image

image = load_image("images/nginx-1.25.tar")   # name "nginx", version "1.25"
verify_image(image)
```

Talk to the container API:

```python
from dockpack.api.client import Client, ApiError

client = Client("http://localhost:8080")
for container in client.list_containers():
    print(container.id, container.name, container.status)
try:
    client.start_container("web")
except ApiError as exc:
    print("could not start:", exc)
```

## What dockpack does not do

- It installs no command-line program; everything is used from Python.
- It has no API server, only the client for one.
- It does not run a container daemon: `Runtime.start` and `Runtime.stop` only report and
  record state, and containers are run by calling the external `docker` command.
- It does not talk to containerd and has no snapshot support.
- `NetworkManager.setup_container_network` creates no virtual Ethernet pairs.
- It does not build a self-contained executable from the bundles it writes.