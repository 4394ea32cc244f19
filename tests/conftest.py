"""Shared fixtures: a small but complete set of content files."""

import textwrap
from pathlib import Path
from typing import Callable, Dict, List, Optional, Type

import pytest

from objcat.content import Catalog, CrossReferenceResolver, DirectiveParser, IndexedTable
from objcat.content.parsers import TableParser
from objcat.content.service import STAGES

CONTENT: Dict[str, str] = {
    "object_base": """
        # Category defaults
        default:break-chance:10
        default:max-stack:40

        name:none
        name:light:Light Source~
        graphics:y
        flags:IGNORE_FIRE

        name:sword:Sword~
        graphics:w
        break:0
        flags:SHOW_DICE

        name:soft armor:Soft Armour~
        graphics:s

        name:ring:Ring~
        graphics:r
        max-stack:10
        flags:EASY_KNOW
    """,
    "projection": """
        code:ACID
        name:acid
        type:element
        desc:acid
        numerator:1
        denominator:3
        divisor:3
        damage-cap:1600
        msgt:BR_ACID
        obvious:1
        color:s
        pvp-flags:SAVE|DAMAGE
        threat:ACID
        threat-flag:IM_ACID

        code:ELEC
        name:lightning
        type:element
        color:b

        code:FIRE
        name:fire
        type:element
        color:r

        code:COLD
        name:frost
        type:element
        color:w
    """,
    "slay": """
        code:EVIL_2
        name:evil creatures
        race-flag:EVIL
        multiplier:2
        power:200
        melee-verb:smite
        range-verb:pierces
        esp-chance:0
        esp-flag:ESP_EVIL

        code:ORC_3
        name:orcs
        base:orc
        multiplier:3
        power:150
        melee-verb:smite
        range-verb:pierces
    """,
    "brand": """
        code:FIRE_3
        name:fire
        verb:burn
        multiplier:3
        power:300
        resist-flag:IM_FIRE
        active-verb:burns
        active-verb-plural:burn
        desc-adjective:fiery

        code:COLD_2
        name:weak frost
        verb:freeze
        multiplier:2
        power:150
        resist-flag:IM_COLD
    """,
    "curse": """
        name:vulnerability
        combat:0:0:-50
        flags:AGGRAVATE
        values:STEALTH[-2]
        desc:makes you vulnerable
        type:soft armor
        type:sword
        conflict:protection

        name:teleportation
        type:ring
        effect:TELEPORT
        dice:40
        msg:Space warps around you.
        time:10+d10
        desc:randomly teleports you
        conflict-flags:NO_TELEPORT
    """,
    "activation": """
        name:CURE_LIGHT
        aim:0
        power:5
        effect:HEAL_HP
        dice:20
        effect:CURE:BLIND
        msg_self:You feel better.
        desc:heals 20 hitpoints and cures blindness

        name:FIRE_BOLT
        aim:1
        power:9
        effect:BOLT:FIRE
        dice:$Dd8
        expr:D:PLAYER_LEVEL:/ 5 + 3
        msg:Your weapon is covered in fire...
        desc:creates a fire bolt

        name:ILLUMINATION
        aim:0
        power:3
        effect:LIGHT_AREA
    """,
    "object_property": """
        name:strength
        type:stat
        code:STR
        power:9
        mult:13
        type-mult:ring:2
        adjective:strong
        neg-adjective:weak

        name:free action
        type:flag
        subtype:protection
        id-type:on wield
        code:FREE_ACT
        power:14
        desc:prevents paralysis

        name:resist fire
        type:resistance
        code:FIRE
        power:6
    """,
    "object_power": """
        name:base power
        dice:$B
        expr:B:OBJ_POWER_DICE:* 5 / 2
        operation:add

        name:ring bonus
        type:ring
        operation:add if positive
        apply-to:ring

        name:resistances
        iterate:resistance
        dice:$B
        expr:B:OBJ_POWER_RESIST:+ 0
        operation:add
    """,
    "object": """
        name:<unknown item>
        graphics:?:r
        type:none

        name:<unknown treasure>
        graphics:$:y
        type:none

        name:<pile>
        graphics:&:w
        type:none

        name:<curse object>
        graphics:~:w
        type:none

        name:& Wooden Torch~
        graphics:~:u
        type:light
        level:1
        weight:30
        cost:1
        alloc:70:1 to 40
        attack:1d1:0:0
        armor:0:0
        pile:40:1d3
        flags:BURNS_OUT
        values:LIGHT[2]
        pval:5000
        desc:A piece of wood
        desc: with an oily rag.

        name:& Dagger~
        graphics:|:W
        type:sword
        level:5
        weight:12
        cost:30
        alloc:40:5 to 20
        attack:1d4:d5:d5
        armor:0:0
        flags:THROWING
        slay:EVIL_2
        brand:FIRE_3
        curse:vulnerability:20
        effect:BOLT:FIRE
        dice:3d$S
        expr:S:WEAPON_DAMAGE:+ 1
        act:FIRE_BOLT
        time:d50
        desc:A short blade.

        name:& Ring~ of Protection
        graphics:=:g
        type:ring
        level:10
        weight:1
        cost:500
        alloc:20:10 to 100
        armor:0:d10M10
        values:RES_FIRE[1] | STEALTH[1]
    """,
    "ego_item": """
        name:of Burning
        info:3000:15
        alloc:30:10 to 60
        type:sword
        combat:d5:d5:0
        min-combat:0:0:0
        flags:IGNORE_FIRE | SHOW_MULT
        values:STR[d2]
        min-values:STR[1]
        brand:FIRE_3
        desc:burns

        name:of Light
        info:500:5
        alloc:20:0 to 80
        item:light:Wooden Torch
        flags
        values:LIGHT[1]
        act:ILLUMINATION
        time:d20
    """,
    "artifact": """
        name:of Galadriel
        base-object:light:Phial
        graphics:!:y
        level:5
        weight:10
        alloc:50:5 to 30
        attack:1d1:0:0
        armor:0:0
        flags:SEE_INVIS
        act:ILLUMINATION
        time:10+d10
        values:LIGHT[3]
        desc:A small crystal phial.

        name:'Sting'
        base-object:sword:Dagger
        level:20
        weight:12
        alloc:15:20 to 60
        attack:1d6:7:8
        armor:0:0
        flags:FREE_ACT | SEE_INVIS
        values:DEX[3] | SPEED[1] | RES_LIGHT[1]
        slay:ORC_3
        brand:COLD_2
        act:FIRE_BOLT
        time:d100
        msg:Sting glows blue.
        desc:An elven blade.
    """,
}

StageRunner = Callable[[Type[TableParser], str], IndexedTable]


def content_lines(text: str) -> List[str]:
    return textwrap.dedent(text).strip("\n").splitlines()


def write_content(directory: Path, overrides: Optional[Dict[str, str]] = None) -> Path:
    """Write every content file into `directory`, replacing some if asked."""
    texts = dict(CONTENT)
    texts.update(overrides or {})
    for stem, text in texts.items():
        (directory / f"{stem}.txt").write_text(
            "\n".join(content_lines(text)) + "\n", encoding="utf-8"
        )
    return directory


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Directory holding the complete content set."""
    return write_content(tmp_path)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def run_stage(catalog: Catalog) -> StageRunner:
    """Run one stage over `text` against the shared catalog and return its table."""
    resolver = CrossReferenceResolver(catalog)

    def run(stage: Type[TableParser], text: str) -> IndexedTable:
        parser = DirectiveParser(source=stage.name)
        table = stage(catalog, resolver)
        table.register(parser)
        parser.parse_lines(content_lines(text))
        table.finish()
        return catalog.table(stage.name)

    return run


@pytest.fixture
def load_before(run_stage: StageRunner) -> Callable[[str], None]:
    """Load the standard content of every stage that precedes `name`."""

    def load(name: str) -> None:
        for stage in STAGES:
            if stage.name == name:
                return
            run_stage(stage, CONTENT[stage.name])
        raise KeyError(name)

    return load
