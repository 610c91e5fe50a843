UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def format_bytes(size: float, decimals: int = 2) -> str:
    """바이트 수를 사람이 읽기 쉬운 문자열로 변환 (예: 1536 -> "1.5 KB")"""
    if not size or size <= 0:
        return "0 Bytes"

    value = float(size)
    index = 0
    while value >= 1024 and index < len(UNITS) - 1:
        value /= 1024
        index += 1

    decimals = max(decimals, 0)
    # 1.50 -> 1.5, 2.00 -> 2
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {UNITS[index]}"
