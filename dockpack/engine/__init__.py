"""Image metadata, runtime directory, docker-run containers and network namespaces."""