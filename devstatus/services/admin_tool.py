"""phpMyAdmin settings for the database admin container.

phpMyAdmin is used unmodified; this module only produces the ``$cfg``
table it reads from ``config.inc.php`` at startup. Values are passed
through as given, with no validation.
"""

from typing import Any

from devstatus.core.settings import AdminToolConfig

SERVER_INDEX = 1
BLOWFISH_SECRET = "nixvm_phpmyadmin_secret_key_2024"

AdminSettings = dict[str, Any]


def server_block(config: AdminToolConfig) -> AdminSettings:
    """Settings for the single configured server."""
    return {
        "auth_type": "config",
        "host": config.host,
        "port": config.port,
        "user": config.user,
        "password": config.password.get_secret_value(),
        "compress": False,
        "AllowNoPassword": False,
    }


def build_sections(config: AdminToolConfig) -> list[tuple[str, AdminSettings]]:
    """Top-level settings grouped the way they appear in config.inc.php."""
    return [
        ("phpMyAdmin configuration", {"blowfish_secret": BLOWFISH_SECRET}),
        (
            "UI preferences",
            {
                "DefaultLang": "en",
                "ServerDefault": SERVER_INDEX,
                "UploadDir": "",
                "SaveDir": "",
            },
        ),
        (
            "Development settings",
            {
                "ShowAll": True,
                "MaxRows": 100,
                "Confirm": True,
                "UseDbSearch": True,
            },
        ),
        (
            "Security settings",
            {
                "AllowArbitraryServer": False,
                "LoginCookieRecall": False,
                "AllowUserDropDatabase": False,
            },
        ),
        (
            "Theme configuration",
            {
                "ThemeDefault": "pmahomme",
                "ThemeManager": True,
            },
        ),
        (
            "Other settings",
            {
                "ExecTimeLimit": 300,
                "MemoryLimit": "256M",
                "NavigationTreeEnableGrouping": True,
                "NavigationTreeDbSeparator": "_",
                "FirstLevelNavigationItems": 100,
                "MaxNavigationItems": 250,
            },
        ),
    ]


def build_admin_tool_settings(config: AdminToolConfig) -> AdminSettings:
    """The full ``$cfg`` mapping as a nested dict."""
    settings: AdminSettings = {"Servers": {SERVER_INDEX: server_block(config)}}
    for _, section in build_sections(config):
        settings.update(section)
    return settings


def php_literal(value: Any) -> str:
    """Render a scalar as a PHP literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_config_inc_php(config: AdminToolConfig) -> str:
    """Render ``config.inc.php`` for the phpMyAdmin container."""
    lines = [
        "<?php",
        "/**",
        " * phpMyAdmin configuration for NixVM (generated)",
        " */",
        "",
        "declare(strict_types=1);",
        "",
        "/**",
        " * Server configuration",
        " */",
        f"$i = {SERVER_INDEX};",
    ]
    for key, value in server_block(config).items():
        lines.append(f"$cfg['Servers'][$i]['{key}'] = {php_literal(value)};")

    for heading, section in build_sections(config):
        lines.extend(["", "/**", f" * {heading}", " */"])
        for key, value in section.items():
            lines.append(f"$cfg['{key}'] = {php_literal(value)};")

    return "\n".join(lines) + "\n"
