"""Configuration loader for Conceptify."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings


class DeviceTypeConfig(BaseModel):
    """A legend entry: one placeable device category."""

    type_tag: str
    name: str
    icon: str = ""
    roles: list[str] = []
    advanced: bool = False  # Advanced settings (tier, login, IP) apply
    pack: bool = False  # Expands to several instances on export


class VlanSeed(BaseModel):
    id: int
    name: str
    color: str


class BoardConfig(BaseModel):
    grid_size: int = 50
    region_padding: int = 8
    default_template: str = "ubuntu"
    pack_templates: list[str] = ["ubuntu", "debian", "windows10", "windowsServer2022"]
    default_vlans: list[VlanSeed] = [VlanSeed(id=10, name="VLAN 10", color="#3b82f6")]


class SessionConfig(BaseModel):
    ttl_ms: int = 10 * 60 * 1000
    storage_key: str = "conceptify:state"


DEFAULT_DEVICE_TYPES: list[DeviceTypeConfig] = [
    DeviceTypeConfig(
        type_tag="windowsServer",
        name="Windows Server",
        icon="🪟",
        roles=["ADDS", "DNS", "DHCP", "IIS"],
        advanced=True,
    ),
    DeviceTypeConfig(
        type_tag="linuxServer",
        name="Linux Server",
        icon="🐧",
        roles=["Web Server", "Database", "File Server"],
        advanced=True,
    ),
    DeviceTypeConfig(
        type_tag="workstation",
        name="Workstation",
        icon="🖥️",
        roles=["Office", "Developer", "Kiosk"],
        advanced=True,
    ),
    DeviceTypeConfig(
        type_tag="networkSwitch",
        name="Network Switch",
        icon="🔌",
        roles=["VLAN", "Port Mirroring", "QoS"],
    ),
    DeviceTypeConfig(type_tag="firewall", name="Firewall", icon="🛡️", roles=["NAT", "VPN", "IPS"]),
    DeviceTypeConfig(type_tag="router", name="Router", icon="📡", roles=["OSPF", "BGP", "MPLS"]),
    DeviceTypeConfig(type_tag="database", name="Database", icon="🗄️", roles=["SQL", "NoSQL", "In-Memory"]),
    DeviceTypeConfig(
        type_tag="loadBalancer",
        name="Load Balancer",
        icon="⚖️",
        roles=["Round Robin", "Least Connections", "IP Hash"],
    ),
    DeviceTypeConfig(type_tag="webServer", name="Web Server", icon="🌐", roles=["Apache", "Nginx", "IIS"]),
    DeviceTypeConfig(
        type_tag="vmPack",
        name="VM Pack",
        icon="📦",
        roles=["Web Server", "Database", "Worker"],
        pack=True,
    ),
]


class AppConfig(BaseModel):
    board: BoardConfig = BoardConfig()
    session: SessionConfig = SessionConfig()
    device_types: list[DeviceTypeConfig] = DEFAULT_DEVICE_TYPES

    def device_type(self, type_tag: str) -> DeviceTypeConfig | None:
        """Look up a legend entry by its type tag."""
        for device_type in self.device_types:
            if device_type.type_tag == type_tag:
                return device_type
        return None

    def roles_for(self, type_tag: str) -> list[str]:
        device_type = self.device_type(type_tag)
        return device_type.roles if device_type else []


class Settings(BaseSettings):
    """Environment-based settings."""

    redis_url: str = "redis://localhost:6379"
    dev_mode: bool = True
    config_path: str = "../config/config.yaml"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


def load_yaml_config(path: str) -> dict[str, Any]:
    """Load a YAML configuration file."""
    config_path = Path(path)
    if not config_path.is_absolute():
        config_path = Path(__file__).parent.parent / path

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def get_config() -> AppConfig:
    """Load and return the application configuration."""
    settings = Settings()
    yaml_config = load_yaml_config(settings.config_path)
    return AppConfig(**yaml_config)


# Singleton instance
settings = Settings()
