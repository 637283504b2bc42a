"""I/O adapters: httpx client, upstream catalog API, error translation."""
