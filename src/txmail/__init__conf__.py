"""Static package metadata and layered-configuration identifiers."""

from __future__ import annotations

name = "txmail"
title = "Transactional notification emails over SMTP"
version = "0.1.0"
homepage = "https://github.com/txmail/txmail"
author = "txmail contributors"
author_email = "maintainers@txmail.dev"

# Identifiers passed to lib_layered_config.read_config
LAYEREDCONF_VENDOR = "txmail"
LAYEREDCONF_APP = "txmail"
LAYEREDCONF_SLUG = "txmail"


def print_info() -> None:
    """Print the summary metadata block."""
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
