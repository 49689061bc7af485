"""Fatal scan conditions. Each one names the byte offset involved."""


class ChunkScanError(ValueError):
    code = "E_SCAN"

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset


class InvalidSignature(ChunkScanError):
    code = "E_SIGNATURE"


class TruncatedChunk(ChunkScanError):
    code = "E_TRUNCATED"


class RepairIOError(ChunkScanError):
    code = "E_REPAIR_IO"
