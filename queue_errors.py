from __future__ import annotations


class AllocationError(MemoryError):
    """
    要素（または値のコピー）の領域を確保できなかった
    呼び出し側で回復可能な失敗として扱う
    """
