"""Attachment folder resolution (UNO: single function)."""


def get_attachment_folder(note_path: str, attachment_folder: str) -> str:
    """Return the vault-relative folder where images pasted into ``note_path`` go.

    ``""`` or ``"/"`` is the vault root, ``"./"`` the note's own folder,
    ``"./sub"`` a subfolder of the note's folder; anything else is taken as a
    vault-relative folder.
    """
    setting = attachment_folder.strip()
    note_parent = note_path.rpartition("/")[0]

    if not setting or setting == "/":
        return ""
    if setting == "./":
        return note_parent
    if setting.startswith("./"):
        subfolder = setting[2:].strip("/")
        return f"{note_parent}/{subfolder}" if note_parent else subfolder
    return setting.strip("/")
