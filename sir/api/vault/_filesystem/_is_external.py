def _is_external(target: str) -> bool:
    return "://" in target or target.startswith("data:")
