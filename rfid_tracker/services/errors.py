class ReferenceNotFound(LookupError):
    """A record an event depends on does not exist.

    kind is one of "tag", "asset-for-tag" or "reader"; value is the
    identifier that was looked up.
    """

    _MESSAGES = {
        "tag": "No tags with the following parameters were found: {{'tag': {value}}}",
        "asset-for-tag": "No assets assigned to the following tag were found: {{'tag': {value}}}",
        "reader": "No readers with the following parameters were found: {{'reader': {value}}}",
    }

    def __init__(self, kind: str, value: str):
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown reference kind: {kind}")
        self.kind = kind
        self.value = value
        super().__init__(self._MESSAGES[kind].format(value=value))


class PersistenceError(RuntimeError):
    """A write required by event creation could not be committed."""

    def __init__(self, message: str, asset_id: str | None = None):
        self.asset_id = asset_id
        super().__init__(message)
