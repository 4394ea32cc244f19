"""Tests for the per-table content parsers."""

import pytest

from objcat.content import (
    CrossReferenceResolver,
    DirectiveParser,
    ElementFlag,
    ParseError,
    ParseErrorKind,
    RandomValue,
)
from objcat.content.lists import (
    COLOURS,
    ELEM_BASE_MAX,
    ELEMENTS,
    KF_INSTA_ART,
    OBJ_MODS,
    TV_LIGHT,
    TV_MAX,
    TVALS,
)
from objcat.content.models import IdType, PowerOperation, PropertySubtype, PropertyType
from objcat.content.parsers import (
    ARTIFACT_SPARE_SLOTS,
    ActivationParser,
    ArtifactParser,
    BrandParser,
    CurseParser,
    EgoParser,
    ObjectBaseParser,
    ObjectParser,
    ObjectPowerParser,
    ObjectPropertyParser,
    ProjectionParser,
    SlayParser,
)

from conftest import CONTENT

FIRE = ELEMENTS.index("FIRE")


def colour(name: str) -> int:
    return [full for _, full in COLOURS].index(name)


def expect_error(run_stage, stage, text: str, kind: ParseErrorKind) -> ParseError:
    with pytest.raises(ParseError) as excinfo:
        run_stage(stage, text)
    assert excinfo.value.kind is kind
    return excinfo.value


class TestObjectBase:
    """Test the category-indexed object base table."""

    def test_single_light_base(self, run_stage) -> None:
        """Test one named category with an element flag."""
        bases = run_stage(ObjectBaseParser, "name:light\nflags:IGNORE_FIRE")

        assert len(bases) == TV_MAX
        light = bases[TV_LIGHT]
        assert light.tval == TV_LIGHT
        assert light.el_info[FIRE].flags == ElementFlag.IGNORE
        assert all(
            info.flags == ElementFlag(0)
            for i, info in enumerate(light.el_info)
            if i != FIRE
        )

    def test_defaults_and_overrides(self, run_stage) -> None:
        """Test default lines seed later bases, and per-base lines override them."""
        bases = run_stage(ObjectBaseParser, CONTENT["object_base"])

        sword = bases[TVALS.index("sword")]
        ring = bases[TVALS.index("ring")]
        assert sword.name == "Sword~"
        assert sword.break_perc == 0
        assert sword.max_stack == 40
        assert sword.kind_flags.names() == ["SHOW_DICE"]
        assert ring.break_perc == 10
        assert ring.max_stack == 10
        assert ring.attr == colour("Red")

    def test_unnamed_categories_zeroed(self, run_stage) -> None:
        """Test every category gets a record even when never named."""
        bases = run_stage(ObjectBaseParser, "default:max-stack:40\nname:ring")

        gold = bases[TVALS.index("gold")]
        assert gold.tval == TVALS.index("gold")
        assert gold.name is None
        assert gold.max_stack == 0

    def test_first_declaration_wins(self, run_stage) -> None:
        """Test a category named twice keeps its first record."""
        bases = run_stage(ObjectBaseParser, "name:ring:First\nname:ring:Second")
        assert bases[TVALS.index("ring")].name == "First"

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("name:wood", ParseErrorKind.UNRECOGNISED_TVAL),
            ("name:ring\ngraphics:Plaid", ParseErrorKind.INVALID_COLOR),
            ("default:weight:5", ParseErrorKind.UNDEFINED_DIRECTIVE),
            ("graphics:r", ParseErrorKind.MISSING_RECORD_HEADER),
            ("name:ring\nflags:EASY_KNOW | SPARKLY", ParseErrorKind.INVALID_FLAG),
        ],
    )
    def test_errors(self, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected object base lines."""
        expect_error(run_stage, ObjectBaseParser, text, kind)


class TestProjection:
    """Test the projection table."""

    def test_load(self, load_before, run_stage) -> None:
        """Test projections are indexed in file order with their details."""
        load_before("projection")
        projections = run_stage(ProjectionParser, CONTENT["projection"])

        assert [p.code for p in projections] == ["ACID", "ELEC", "FIRE", "COLD"]
        assert [p.index for p in projections] == [0, 1, 2, 3]
        acid = projections[0]
        assert acid.denominator == RandomValue(base=3)
        assert acid.obvious
        assert acid.pvp_flags.names() == ["SAVE", "DAMAGE"]
        assert acid.color == colour("Slate")

    def test_element_order_enforced(self, run_stage) -> None:
        """Test element projections must follow the element table."""
        error = expect_error(
            run_stage, ProjectionParser, "code:ACID\ncode:FIRE", ParseErrorKind.ELEMENT_NAME_MISMATCH
        )
        assert error.line_number == 2

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("code:ACID\nmsgt:BR_WOOD", ParseErrorKind.INVALID_MESSAGE),
            ("code:ACID\nthreat-flag:SHINY", ParseErrorKind.INVALID_FLAG),
            ("code:ACID\ncolor:Plaid", ParseErrorKind.INVALID_COLOR),
            ("name:acid", ParseErrorKind.MISSING_RECORD_HEADER),
        ],
    )
    def test_errors(self, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected projection lines."""
        expect_error(run_stage, ProjectionParser, text, kind)


class TestSlayAndBrand:
    """Test the slay and brand tables."""

    def test_slays(self, run_stage) -> None:
        """Test slays by race flag and by monster base."""
        slays = run_stage(SlayParser, CONTENT["slay"])

        assert [s.code for s in slays] == ["EVIL_2", "ORC_3"]
        assert slays[0].race_flag is not None and slays[0].base is None
        assert slays[1].base == "orc" and slays[1].race_flag is None
        assert slays[1].multiplier == 3

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("code:X\nrace-flag:EVIL\nbase:orc", ParseErrorKind.INVALID_SLAY),
            ("code:X\nbase:orc\nrace-flag:EVIL", ParseErrorKind.INVALID_SLAY),
            ("code:X\nbase:wombat", ParseErrorKind.INVALID_MONSTER_BASE),
            ("code:X\nrace-flag:SHINY", ParseErrorKind.INVALID_FLAG),
            ("code:X\nesp-flag:ESP_WOMBAT", ParseErrorKind.INVALID_FLAG),
            ("multiplier:2", ParseErrorKind.MISSING_RECORD_HEADER),
        ],
    )
    def test_slay_errors(self, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected slay lines."""
        expect_error(run_stage, SlayParser, text, kind)

    def test_brands(self, run_stage) -> None:
        """Test brand details are kept."""
        brands = run_stage(BrandParser, CONTENT["brand"])

        assert [b.index for b in brands] == [0, 1]
        assert brands[0].verb == "burn"
        assert brands[0].desc_adjective == "fiery"
        assert brands[1].active_verb is None

    def test_brand_resist_flag(self, run_stage) -> None:
        """Test an unknown resist flag is rejected."""
        expect_error(run_stage, BrandParser, "code:X\nresist-flag:IM_WOOD", ParseErrorKind.INVALID_FLAG)


class TestCurse:
    """Test the curse table."""

    def test_load(self, load_before, run_stage) -> None:
        """Test curse objects collect bonuses, values and effects."""
        load_before("curse")
        curses = run_stage(CurseParser, CONTENT["curse"])

        vulnerability, teleportation = curses
        assert vulnerability.obj.to_a == -50
        assert vulnerability.obj.flags.names() == ["AGGRAVATE"]
        assert vulnerability.obj.modifiers[OBJ_MODS.index("STEALTH")] == -2
        assert vulnerability.poss[TVALS.index("sword")]
        assert not vulnerability.poss[TVALS.index("ring")]
        assert vulnerability.conflict == "|protection|"

        effect = teleportation.obj.effects[0]
        assert effect.name == "TELEPORT"
        assert effect.dice.evaluate().base == 40
        assert effect.self_msg == "Space warps around you."
        assert teleportation.obj.time == RandomValue(base=10, dice=1, sides=10)
        assert teleportation.conflict_flags.names() == ["NO_TELEPORT"]
        assert teleportation.conflict is None

    def test_msg_replaces_message(self, load_before, run_stage) -> None:
        """Test a later msg line overwrites the earlier one."""
        load_before("curse")
        curses = run_stage(CurseParser, "name:x\neffect:TELEPORT\nmsg:one\nmsg:two")
        assert curses[0].obj.effects[0].self_msg == "two"

    def test_invalid_flag_keeps_valid_bit(self, catalog) -> None:
        """Test a bad flag token fails the load after setting the good one."""
        curses = CurseParser(catalog, CrossReferenceResolver(catalog))
        parser = DirectiveParser()
        curses.register(parser)

        parser.parse_line("name:sticky")
        with pytest.raises(ParseError) as excinfo:
            parser.parse_line("flags:STICKY | GLUEY")

        assert excinfo.value.kind is ParseErrorKind.INVALID_FLAG
        assert curses.current.obj.flags.names() == ["STICKY"]

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("msg:You shudder.", ParseErrorKind.MISSING_RECORD_HEADER),
            ("name:x\ntype:wood", ParseErrorKind.UNRECOGNISED_TVAL),
            ("name:x\nvalues:LUCK[1]", ParseErrorKind.INVALID_VALUE),
            ("name:x\neffect:SPLAT", ParseErrorKind.INVALID_EFFECT),
        ],
    )
    def test_errors(self, load_before, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected curse lines."""
        load_before("curse")
        expect_error(run_stage, CurseParser, text, kind)


class TestActivation:
    """Test the activation table and the shared effect directives."""

    def test_three_entries_linked(self, load_before, run_stage) -> None:
        """Test traversal from the first entry reaches each neighbour then stops."""
        load_before("activation")
        activations = run_stage(ActivationParser, CONTENT["activation"])

        names = []
        entry = activations[0]
        while entry is not None:
            names.append(entry.name)
            entry = entry.next
        assert names == ["CURE_LIGHT", "FIRE_BOLT", "ILLUMINATION"]

    def test_effects(self, load_before, run_stage) -> None:
        """Test effects, subtypes, messages and bound dice."""
        load_before("activation")
        cure_light, fire_bolt, _ = run_stage(ActivationParser, CONTENT["activation"])

        cure, heal = cure_light.effects
        assert heal.name == "HEAL_HP" and heal.dice.evaluate().base == 20
        assert cure.subtype_name == "BLIND"
        assert cure.self_msg == "You feel better."
        assert heal.self_msg is None

        bolt = fire_bolt.effects[0]
        assert bolt.subtype == 2
        assert fire_bolt.aim
        assert fire_bolt.message == "Your weapon is covered in fire..."
        assert bolt.dice.evaluate({"player_level": 20}) == RandomValue(dice=7, sides=8)

    def test_effects_newest_first(self, load_before, run_stage) -> None:
        """Test each effect goes to the front and details refine the newest one."""
        load_before("activation")
        activations = run_stage(
            ActivationParser,
            "name:A\neffect:HEAL_HP\ndice:20\neffect:DAMAGE\ndice:5\nmsg_self:ouch",
        )

        damage, heal = activations[0].effects
        assert damage.name == "DAMAGE" and heal.name == "HEAL_HP"
        assert damage.dice.evaluate().base == 5
        assert damage.self_msg == "ouch"
        assert heal.dice.evaluate().base == 20
        assert heal.self_msg is None

    def test_effect_details_before_effect_ignored(self, load_before, run_stage) -> None:
        """Test effect sub-directives with no effect yet are accepted as no-ops."""
        load_before("activation")
        activations = run_stage(
            ActivationParser,
            "name:QUIET\ndice:2d6\neffect-yx:1:2\nexpr:D:PLAYER_LEVEL:+ 1\nmsg_self:hi\n"
            "effect:DAMAGE\nexpr:D:PLAYER_LEVEL:+ 1",
        )
        damage = activations[0].effects[0]
        assert damage.dice is None
        assert damage.y == 0 and damage.x == 0

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("dice:2d6", ParseErrorKind.MISSING_RECORD_HEADER),
            ("name:A\neffect:BOLT:WOOD", ParseErrorKind.INVALID_VALUE),
            ("name:A\neffect:RESTORE_STAT:LUCK", ParseErrorKind.INVALID_VALUE),
            ("name:A\neffect:DAMAGE\ndice:2d", ParseErrorKind.INVALID_DICE),
            ("name:A\neffect:DAMAGE\ndice:$Dd4\nexpr:S:PLAYER_LEVEL:+ 1", ParseErrorKind.UNBOUND_EXPRESSION),
            ("name:A\neffect:DAMAGE\ndice:$Dd4\nexpr:D:GOLD:+ 1", ParseErrorKind.INVALID_EXPRESSION),
            ("name:A\neffect:DAMAGE\ndice:$Dd4\nexpr:D:PLAYER_LEVEL:+", ParseErrorKind.BAD_EXPRESSION_STRING),
        ],
    )
    def test_errors(self, load_before, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected activation lines."""
        load_before("activation")
        expect_error(run_stage, ActivationParser, text, kind)


class TestObjectProperty:
    """Test the object property table."""

    def test_load(self, run_stage) -> None:
        """Test codes are looked up in the vocabulary of their property class."""
        properties = run_stage(ObjectPropertyParser, CONTENT["object_property"])

        strength, free_action, resist_fire = properties
        assert strength.type is PropertyType.STAT
        assert strength.code_index == OBJ_MODS.index("STR")
        assert strength.type_mult[TVALS.index("ring")] == 2
        assert strength.type_mult[TVALS.index("sword")] == 1
        assert free_action.subtype is PropertySubtype.PROT
        assert free_action.id_type is IdType.WIELD
        assert resist_fire.type is PropertyType.RESIST
        assert resist_fire.code_index == FIRE

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("name:x\ntype:smell", ParseErrorKind.INVALID_PROPERTY),
            ("name:x\ntype:none", ParseErrorKind.INVALID_PROPERTY),
            ("name:x\nsubtype:tasty", ParseErrorKind.INVALID_SUBTYPE),
            ("name:x\nid-type:never", ParseErrorKind.INVALID_ID_TYPE),
            ("name:x\ncode:STR", ParseErrorKind.MISSING_OBJ_PROP_TYPE),
            ("name:x\ntype:flag\ncode:STR", ParseErrorKind.INVALID_OBJ_PROP_CODE),
            ("name:x\ntype-mult:wood:2", ParseErrorKind.UNRECOGNISED_TVAL),
        ],
    )
    def test_errors(self, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected object property lines."""
        expect_error(run_stage, ObjectPropertyParser, text, kind)


class TestObjectPower:
    """Test the power calculation table."""

    def test_load(self, load_before, run_stage) -> None:
        """Test operations, iteration and bound expressions."""
        load_before("object_power")
        base_power, ring_bonus, resistances = run_stage(ObjectPowerParser, CONTENT["object_power"])

        assert base_power.operation is PowerOperation.ADD
        assert base_power.dice.evaluate({"obj_power_dice": 8}).base == 20
        assert base_power.iterate.max == 1
        assert ring_bonus.operation is PowerOperation.ADD_IF_POSITIVE
        assert ring_bonus.apply_to == "ring"
        assert resistances.iterate.property_type is PropertyType.RESIST
        assert resistances.iterate.max == ELEMENTS.index("TIME") + 1

    def test_type_before_objects(self, load_before, run_stage) -> None:
        """Test categories resolve to no kinds while the object table is not loaded."""
        load_before("object_power")
        calculations = run_stage(ObjectPowerParser, "name:x\ntype:ring")
        assert calculations[0].poss_items == []

    def test_possible_items_newest_first(self, load_before, run_stage) -> None:
        """Test categories and single kinds go in front of earlier entries."""
        load_before("ego_item")
        calculations = run_stage(
            ObjectPowerParser, "name:x\ntype:none\nitem:ring:Ring of Protection\ntype:light"
        )
        assert calculations[0].poss_items == [4, 6, 3, 2, 1, 0]

    def test_item_zero_rejected(self, load_before, run_stage) -> None:
        """Test the first kind of the table cannot be named as an item."""
        load_before("ego_item")
        expect_error(
            run_stage,
            ObjectPowerParser,
            "name:x\nitem:none:<unknown item>",
            ParseErrorKind.INVALID_ITEM_NUMBER,
        )

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("name:x\noperation:subtract", ParseErrorKind.INVALID_OPERATION),
            ("name:x\niterate:colour", ParseErrorKind.INVALID_ITERATE),
            ("name:x\ntype:wood", ParseErrorKind.UNRECOGNISED_TVAL),
            ("name:x\nitem:ring:Ring of Protection", ParseErrorKind.INVALID_ITEM_NUMBER),
            ("name:x\ndice:$B\nexpr:B:PLAYER_LEVEL:+ 1", ParseErrorKind.INVALID_EXPRESSION),
        ],
    )
    def test_errors(self, load_before, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected power calculation lines."""
        load_before("object_power")
        expect_error(run_stage, ObjectPowerParser, text, kind)


class TestObject:
    """Test the object kind table."""

    def test_load(self, load_before, run_stage) -> None:
        """Test kinds get sequential subtypes per category and full details."""
        load_before("object")
        kinds = run_stage(ObjectParser, CONTENT["object"])

        assert [k.kidx for k in kinds] == list(range(7))
        assert [k.sval for k in kinds[:4]] == [1, 2, 3, 4]
        torch, dagger, ring = kinds[4], kinds[5], kinds[6]

        assert torch.sval == 1 and torch.tval == TV_LIGHT
        assert torch.text == "A piece of wood with an oily rag."
        assert torch.alloc.min_level == 1 and torch.alloc.max_level == 40
        assert torch.modifiers[OBJ_MODS.index("LIGHT")] == RandomValue(base=2)
        assert torch.stack_size == RandomValue(dice=1, sides=3)
        assert torch.base.el_info[FIRE].flags == ElementFlag.IGNORE

        assert dagger.dd == 1 and dagger.ds == 4
        assert dagger.d_char == "|"
        assert dagger.slays == [True, False]
        assert dagger.brands == [True, False]
        assert dagger.curses == [20, 0]
        assert dagger.activation.name == "FIRE_BOLT"
        assert dagger.kind_flags.has("SHOW_DICE")
        assert dagger.effects[0].dice.evaluate({"weapon_damage": 4}) == RandomValue(dice=3, sides=5)

        assert ring.to_a == RandomValue(dice=1, sides=10, m_bonus=10)
        assert ring.el_info[FIRE].res_level == 1
        assert ring.slays is None and ring.brands is None and ring.curses is None

    def test_allocation_range_spacing(self, load_before, run_stage) -> None:
        """Test spaces around `to` are optional and trailing text is ignored."""
        load_before("object")
        kinds = run_stage(ObjectParser, "name:Rock\ntype:sword\nalloc:40:5to20 deep")
        assert kinds[0].alloc.min_level == 5 and kinds[0].alloc.max_level == 20

    def test_unknown_activation_is_soft(self, load_before, run_stage) -> None:
        """Test an unknown activation name leaves the kind without one."""
        load_before("object")
        kinds = run_stage(ObjectParser, "name:Rock\ntype:sword\nact:SHOUT")
        assert kinds[0].activation is None

    def test_base_kind_flags_merged(self, load_before, run_stage) -> None:
        """Test kinds inherit their category's kind flags."""
        load_before("object")
        kinds = run_stage(ObjectParser, "name:& Band~\ntype:ring")
        assert kinds[0].kind_flags.has("EASY_KNOW")

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("level:5", ParseErrorKind.MISSING_RECORD_HEADER),
            ("name:x\ntype:wood", ParseErrorKind.UNRECOGNISED_TVAL),
            ("name:x\ngraphics:|:Plaid", ParseErrorKind.INVALID_COLOR),
            ("name:x\nalloc:40:5-20", ParseErrorKind.INVALID_ALLOCATION),
            ("name:x\nslay:TROLL_3", ParseErrorKind.UNRECOGNISED_SLAY),
            ("name:x\nbrand:ACID_3", ParseErrorKind.UNRECOGNISED_BRAND),
            ("name:x\ncurse:bad luck:10", ParseErrorKind.UNRECOGNISED_CURSE),
            ("name:x\nvalues:STR[x]", ParseErrorKind.INVALID_VALUE),
            ("name:x\nflags:SHINY", ParseErrorKind.INVALID_FLAG),
        ],
    )
    def test_errors(self, load_before, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected object lines."""
        load_before("object")
        expect_error(run_stage, ObjectParser, text, kind)


class TestEgo:
    """Test the ego item table."""

    def test_load(self, load_before, run_stage) -> None:
        """Test possible kinds, bonuses and values."""
        load_before("ego_item")
        burning, light = run_stage(EgoParser, CONTENT["ego_item"])

        assert burning.eidx == 0 and light.eidx == 1
        assert burning.poss_items == [5]
        assert burning.cost == 3000 and burning.rating == 15
        assert burning.el_info[FIRE].flags == ElementFlag.IGNORE
        assert burning.kind_flags.names() == ["SHOW_MULT"]
        assert burning.modifiers[OBJ_MODS.index("STR")] == RandomValue(dice=1, sides=2)
        assert burning.min_modifiers[OBJ_MODS.index("STR")] == 1
        assert burning.brands == [True, False]

        assert light.poss_items == [4]
        assert light.activation.name == "ILLUMINATION"
        assert not light.flags

    def test_possible_items_newest_first(self, load_before, run_stage) -> None:
        """Test each type or item line puts its kinds in front of earlier ones."""
        load_before("ego_item")
        egos = run_stage(
            EgoParser, "name:x\nitem:sword:Dagger\ntype:light\nitem:ring:Ring of Protection"
        )
        assert egos[0].poss_items == [6, 4, 5]

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("name:x\ntype:soft armor", ParseErrorKind.NO_KIND_FOR_EGO_TYPE),
            ("name:x\ntype:wood", ParseErrorKind.UNRECOGNISED_TVAL),
            ("name:x\nitem:sword:Broom", ParseErrorKind.INVALID_ITEM_NUMBER),
            ("name:x\nitem:none:<unknown item>", ParseErrorKind.INVALID_ITEM_NUMBER),
            ("name:x\nalloc:10:5 to 300", ParseErrorKind.OUT_OF_BOUNDS),
            ("name:x\nalloc:10:-1 to 30", ParseErrorKind.OUT_OF_BOUNDS),
            ("name:x\nmin-values:STR[d2]", ParseErrorKind.INVALID_VALUE),
        ],
    )
    def test_errors(self, load_before, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected ego lines."""
        load_before("ego_item")
        expect_error(run_stage, EgoParser, text, kind)


class TestArtifact:
    """Test the artifact table and special artifact kinds."""

    def test_special_light_synthesized(self, load_before, run_stage, catalog) -> None:
        """Test an unknown light subtype gets a new kind whose sentinels are overwritten."""
        load_before("artifact")
        kinds_before = len(catalog.object_kinds)
        light_svals = catalog.object_bases[TV_LIGHT].num_svals

        artifacts = run_stage(ArtifactParser, CONTENT["artifact"])

        assert len(catalog.object_kinds) == kinds_before + 1
        phial = catalog.object_kinds[kinds_before]
        assert phial.name == "& Phial~"
        assert phial.sval == light_svals + 1
        assert phial.kind_flags.has(KF_INSTA_ART)
        assert phial.level == 5 and phial.weight == 10
        assert phial.d_char == "!" and phial.d_attr == colour("Yellow")

        galadriel = artifacts[0]
        assert (galadriel.tval, galadriel.sval) == (TV_LIGHT, phial.sval)
        assert phial.activation.name == "ILLUMINATION"
        assert galadriel.activation is None
        assert phial.time == RandomValue(base=10, dice=1, sides=10)

    def test_sentinels_visible_before_level(self, load_before, run_stage, catalog) -> None:
        """Test the synthesized kind carries -1 level and weight until set."""
        load_before("artifact")
        run_stage(ArtifactParser, "name:of Elendil\nbase-object:light:Star")

        star = catalog.object_kinds[-1]
        assert star.level == -1 and star.weight == -1

    def test_table_size_and_spare_slots(self, load_before, run_stage, catalog) -> None:
        """Test the table holds declared artifacts plus spare slots."""
        load_before("artifact")
        artifacts = run_stage(ArtifactParser, CONTENT["artifact"])

        assert catalog.a_max == 2
        assert len(artifacts) == 2 + ARTIFACT_SPARE_SLOTS
        assert [a.aidx for a in artifacts] == list(range(len(artifacts)))
        assert artifacts[2].name == ""

    def test_ordinary_artifact(self, load_before, run_stage, catalog) -> None:
        """Test an artifact on an existing kind keeps its own details."""
        load_before("artifact")
        sting = run_stage(ArtifactParser, CONTENT["artifact"])[1]

        dagger = catalog.object_kinds[5]
        assert sting.sval == dagger.sval
        assert dagger.level == 5
        assert sting.level == 20
        assert sting.activation.name == "FIRE_BOLT"
        assert sting.modifiers[OBJ_MODS.index("DEX")] == 3
        assert sting.el_info[ELEMENTS.index("LIGHT")].res_level == 1
        assert sting.slays == [False, True]
        assert sting.alt_msg == "Sting glows blue."
        assert all(
            sting.el_info[i].flags & ElementFlag.IGNORE for i in range(ELEM_BASE_MAX + 1)
        )

    def test_special_kinds_bound(self, load_before, run_stage, catalog) -> None:
        """Test the special kinds and curse objects are bound after the table."""
        load_before("artifact")
        run_stage(ArtifactParser, CONTENT["artifact"])

        assert catalog.unknown_item_kind.name == "<unknown item>"
        assert catalog.unknown_gold_kind.name == "<unknown treasure>"
        assert catalog.pile_kind.name == "<pile>"
        assert catalog.curse_object_kind.name == "<curse object>"
        for curse in catalog.curses:
            assert curse.obj.kind is catalog.curse_object_kind
            assert curse.obj.sval == 4

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("name:x\nbase-object:sword:Dagger\ngraphics:|:r", ParseErrorKind.NOT_SPECIAL_ARTIFACT),
            ("name:x\nlevel:5", ParseErrorKind.INVALID_ITEM_NUMBER),
            ("name:x\nbase-object:wood:Stick", ParseErrorKind.UNRECOGNISED_TVAL),
            ("name:x\nalloc:10:5 to 256", ParseErrorKind.OUT_OF_BOUNDS),
            ("name:x\nbase-object:light:Star\ngraphics:*:Plaid", ParseErrorKind.INVALID_COLOR),
            ("weight:10", ParseErrorKind.MISSING_RECORD_HEADER),
        ],
    )
    def test_errors(self, load_before, run_stage, text: str, kind: ParseErrorKind) -> None:
        """Test rejected artifact lines."""
        load_before("artifact")
        expect_error(run_stage, ArtifactParser, text, kind)
