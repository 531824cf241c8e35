"""Board item models for Conceptify."""

from enum import Enum
from ipaddress import IPv4Address
from typing import Annotated, Literal, Optional, Union

from pydantic import ConfigDict, Field, field_serializer, model_validator

from .base import CamelModel

SSH_KEY_PREFIXES = ("ssh-rsa", "ssh-ed25519", "ecdsa-sha2-", "sk-")


class Position(CamelModel):
    """Top-left corner of a grid cell, in canvas pixels."""

    model_config = ConfigDict(frozen=True)

    left: int
    top: int


class PerformanceTier(str, Enum):
    BASIC = "basic"
    STANDARD = "standard"
    HIGH = "high"


class IpMode(str, Enum):
    DHCP = "dhcp"
    STATIC = "static"


class AdvancedSettings(CamelModel):
    """Optional provisioning settings for server and workstation types."""

    performance_tier: PerformanceTier = PerformanceTier.STANDARD
    monitoring: bool = False
    username: Optional[str] = Field(default=None, max_length=32)
    ssh_public_key: Optional[str] = None
    ip_mode: IpMode = IpMode.DHCP
    static_ip: Optional[IPv4Address] = None
    subnet_mask: Optional[int] = Field(default=None, ge=0, le=32)

    @model_validator(mode="after")
    def check_addressing(self) -> "AdvancedSettings":
        if self.ip_mode == IpMode.STATIC and (self.static_ip is None or self.subnet_mask is None):
            raise ValueError("static IP mode requires static_ip and subnet_mask")
        if self.ssh_public_key and not self.ssh_public_key.startswith(SSH_KEY_PREFIXES):
            raise ValueError("ssh_public_key is not an OpenSSH public key")
        return self


class PackGroup(CamelModel):
    """Expansion settings of a pack item: one icon, many derived machines."""

    instance_count: int = Field(default=1, ge=1, le=10)
    template_type: str
    vlan_memberships: set[int] = set()

    @field_serializer("vlan_memberships")
    def _sorted_vlans(self, value: set[int]) -> list[int]:
        return sorted(value)


class ItemBase(CamelModel):
    """Fields shared by every placed item."""

    id: str
    type_tag: str
    position: Position
    roles: set[str] = set()
    vlan_memberships: set[int] = set()
    advanced_settings: Optional[AdvancedSettings] = None

    @field_serializer("roles", "vlan_memberships")
    def _sorted_members(self, value: set) -> list:
        return sorted(value)

    def member_vlans(self) -> set[int]:
        """VLANs this item is grouped under on the board and in exports."""
        return self.vlan_memberships


class SimpleItem(ItemBase):
    kind: Literal["simple"] = "simple"


class PackItem(ItemBase):
    kind: Literal["pack"] = "pack"
    group: PackGroup

    def member_vlans(self) -> set[int]:
        # Pack items carry group-scoped VLANs
        return self.group.vlan_memberships


Item = Annotated[Union[SimpleItem, PackItem], Field(discriminator="kind")]


class PlacementCandidate(CamelModel):
    """What the UI dropped: a legend template (no item_id) or a placed item."""

    type_tag: str
    item_id: Optional[str] = None
