"""
卡牌种类能力测试
打手、加特林、小弟、浪人、酿酒师、尼莫、伪鸭以及默认攻击
"""

import sys
from pathlib import Path

import pytest

# 确保可以导入项目模块
sys.path.insert(0, str(Path(__file__).parent.parent))

from duckdog.config import GameConfig
from duckdog.events import EventType
from duckdog.hooks import HookName
from duckdog.kinds.dogs import LAD_KIND, lad_bonus
from duckdog.match import Match, TurnContext


class RecordingView:
    """立即完成并记录信号的卡牌视图"""

    def __init__(self):
        self.signals = []

    def show_attack(self, done):
        self.signals.append("attack")
        done()

    def signal_ability(self, done):
        self.signals.append("ability")
        done()

    def signal_heal(self, done):
        self.signals.append("heal")
        done()

    def signal_damage(self, done):
        self.signals.append("damage")
        done()

    def update(self):
        pass


class DeferredView(RecordingView):
    """信号先挂起，由测试逐个完成"""

    def __init__(self, pending):
        super().__init__()
        self.pending = pending

    def _defer(self, name, done):
        self.signals.append(name)
        self.pending.append(done)

    def show_attack(self, done):
        self._defer("attack", done)

    def signal_ability(self, done):
        self._defer("ability", done)

    def signal_heal(self, done):
        self._defer("heal", done)

    def signal_damage(self, done):
        self._defer("damage", done)


def make_match(**config_overrides):
    config = GameConfig(
        player_power=10, max_turns=50, locale="zh_CN", task_timeout=0.0,
        **config_overrides,
    )
    return Match([], [], config=config, view_factory=lambda card: RecordingView())


def place(match, index, kind_id):
    """把卡牌放到指定玩家牌桌末尾并执行 on_enter_play"""
    player = match.players[index]
    card = match.kinds.create(kind_id)
    card.view = RecordingView()
    player.table.append(card)
    card.invoke(HookName.ON_ENTER_PLAY, context(match, card), lambda: None)
    return card


def context(match, card):
    owner = match.owner_of(card)
    other = match.players[1] if owner is match.players[0] else match.players[0]
    return TurnContext(match, card, owner, other)


def act(match, card, hook):
    """执行一个生命周期钩子，返回完成次数"""
    calls = []
    card.invoke(hook, context(match, card), lambda: calls.append(1))
    return len(calls)


class TestDefaultAttack:
    """默认攻击"""

    def test_hits_mirrored_card(self):
        match = make_match()
        dog = place(match, 0, "dog")
        duck = place(match, 1, "duck")

        assert act(match, dog, HookName.ATTACK) == 1
        assert duck.current_power == 0
        assert dog.view.signals == ["attack"]
        assert duck.view.signals == ["damage"]

    def test_hits_player_when_slot_empty(self):
        match = make_match()
        place(match, 1, "duck")
        dog = place(match, 0, "dog")  # 位置 0
        place(match, 0, "dog")        # 位置 1，对面为空

        second_dog = match.players[0].table[1]
        act(match, second_dog, HookName.ATTACK)
        assert match.players[1].current_power == 9
        assert dog.current_power == 3

    def test_player_hit_damage_configurable(self):
        match = make_match(player_hit_damage=3)
        dog = place(match, 0, "dog")
        act(match, dog, HookName.ATTACK)
        assert match.players[1].current_power == 7


class TestTrasher:
    """打手：受到的伤害 -1"""

    def test_reduces_damage(self):
        match = make_match()
        duck = place(match, 0, "duck")
        trasher = place(match, 1, "trasher")

        act(match, duck, HookName.ATTACK)
        assert trasher.current_power == 4
        assert trasher.view.signals == ["ability", "damage"]

    def test_one_damage_is_fully_absorbed(self):
        match = make_match()
        duck = place(match, 0, "duck")
        duck.current_power = 1
        trasher = place(match, 1, "trasher")

        act(match, duck, HookName.ATTACK)
        assert trasher.current_power == 5
        assert "damage" not in trasher.view.signals

    @pytest.mark.parametrize("amount, expected", [(0, -1), (1, 0), (4, 3)])
    def test_hook_returns_amount_minus_one(self, amount, expected):
        """钩子本身不截断，负数由伤害结算忽略"""
        match = make_match()
        duck = place(match, 0, "duck")
        trasher = place(match, 1, "trasher")
        results = []

        trasher.invoke(
            HookName.MODIFY_DAMAGE_TAKEN, amount, duck, context(match, trasher), results.append
        )

        assert results == [expected]
        assert trasher.view.signals == ["ability"]
        assert trasher.current_power == 5


class TestGatling:
    """加特林：对每张敌方卡牌造成 2 点伤害"""

    def test_hits_every_opposing_card(self):
        match = make_match()
        gatling = place(match, 0, "gatling")
        duck, dog, trasher = (place(match, 1, k) for k in ("duck", "dog", "trasher"))

        act(match, gatling, HookName.ATTACK)

        assert duck.current_power == 0
        assert dog.current_power == 1
        assert trasher.current_power == 4
        assert match.players[1].current_power == 10

    def test_volley_waits_for_each_hit(self):
        """伤害逐张结算，全部命中后续体才调用一次"""
        match = make_match()
        pending = []
        gatling = place(match, 0, "gatling")
        gatling.view = DeferredView(pending)
        dogs = [place(match, 1, "dog") for _ in range(3)]
        for dog in dogs:
            dog.view = DeferredView(pending)
        finished = []

        gatling.invoke(HookName.ATTACK, context(match, gatling), lambda: finished.append(1))

        released = 0
        while pending:
            assert len(pending) == 1
            assert finished == []
            pending.pop()()
            released += 1
            hits = sum(1 for dog in dogs if dog.current_power == 1)
            assert hits == max(released - 1, 0)

        assert released == 4
        assert [dog.current_power for dog in dogs] == [1, 1, 1]
        assert finished == [1]

    def test_empty_table_only_animates(self):
        match = make_match()
        gatling = place(match, 0, "gatling")
        assert act(match, gatling, HookName.ATTACK) == 1
        assert gatling.view.signals == ["attack"]
        assert match.players[1].current_power == 10


class TestLad:
    """小弟：在场越多越强"""

    @pytest.mark.parametrize("count, bonus", [(0, 0), (1, 1), (2, 3), (3, 6), (4, 10)])
    def test_triangular_bonus(self, count, bonus):
        match = make_match()
        for _ in range(count):
            lad = place(match, 1, "lad")
        sample = match.kinds.create("lad")
        assert match.kinds.counts.get(LAD_KIND) == count
        assert lad_bonus(sample) == bonus

    def test_bonus_to_creature_damage(self):
        match = make_match()
        lad = place(match, 0, "lad")
        place(match, 0, "lad")
        trasher = place(match, 1, "trasher")

        # 2 + 3 - 1
        act(match, lad, HookName.ATTACK)
        assert trasher.current_power == 1

    def test_reduces_damage_taken(self):
        match = make_match()
        gatling = place(match, 0, "gatling")
        lad = place(match, 1, "lad")
        place(match, 1, "lad")

        act(match, gatling, HookName.ATTACK)
        assert lad.current_power == 2

    def test_player_damage_not_boosted(self):
        match = make_match()
        for _ in range(3):
            place(match, 0, "lad")
        lad = match.players[0].table[0]
        act(match, lad, HookName.ATTACK)
        assert match.players[1].current_power == 9

    def test_counted_once_per_instance(self):
        match = make_match()
        lad = place(match, 0, "lad")
        act(match, lad, HookName.ON_ENTER_PLAY)
        assert match.kinds.counts.get(LAD_KIND) == 1

        lad.invoke(HookName.ON_LEAVE_PLAY, lambda: None)
        lad.invoke(HookName.ON_LEAVE_PLAY, lambda: None)
        assert match.kinds.counts.get(LAD_KIND) == 0

    def test_discard_decrements(self):
        match = make_match()
        lad = place(match, 0, "lad")
        place(match, 0, "lad")
        match.discard(lad)
        assert match.kinds.counts.get(LAD_KIND) == 1
        assert lad not in match.players[0].table


class TestRogue:
    """浪人：夺取敌方种类的伤害修正能力"""

    def test_steals_from_kind_templates(self):
        match = make_match()
        rogue = place(match, 0, "rogue")
        place(match, 1, "lad")
        stolen_events = []
        match.event_bus.subscribe(EventType.HOOKS_STOLEN, stolen_events.append)

        assert act(match, rogue, HookName.BEFORE_ATTACK) == 1

        lad_template = match.kinds.template("lad")
        assert not lad_template.owns(HookName.MODIFY_DAMAGE_TO_CREATURE)
        assert not lad_template.owns(HookName.MODIFY_DAMAGE_TAKEN)
        assert "modify_damage_taken" in rogue.overrides
        assert len(stolen_events) == 1
        assert stolen_events[0].data["kind"] == "lad"

    def test_later_instances_lose_ability(self):
        match = make_match()
        rogue = place(match, 0, "rogue")
        place(match, 1, "trasher")
        act(match, rogue, HookName.BEFORE_ATTACK)

        newcomer = place(match, 1, "trasher")
        gatling = place(match, 0, "gatling")
        act(match, gatling, HookName.ATTACK)
        assert newcomer.current_power == 3

    def test_rogue_gains_stolen_ability(self):
        match = make_match()
        rogue = place(match, 0, "rogue")
        place(match, 1, "trasher")
        act(match, rogue, HookName.BEFORE_ATTACK)

        gatling = place(match, 1, "gatling")
        act(match, gatling, HookName.ATTACK)
        # 2 - 1
        assert rogue.current_power == 1

    def test_second_theft_is_noop(self):
        match = make_match()
        rogue = place(match, 0, "rogue")
        place(match, 1, "trasher")
        events = []
        match.event_bus.subscribe(EventType.HOOKS_STOLEN, events.append)

        act(match, rogue, HookName.BEFORE_ATTACK)
        act(match, rogue, HookName.BEFORE_ATTACK)
        assert len(events) == 1

    def test_does_not_rob_rogues(self):
        match = make_match()
        rogue = place(match, 0, "rogue")
        place(match, 1, "rogue")
        act(match, rogue, HookName.BEFORE_ATTACK)
        assert rogue.overrides == {}

    def test_theft_scoped_to_match(self):
        first, second = make_match(), make_match()
        rogue = place(first, 0, "rogue")
        place(first, 1, "trasher")
        act(first, rogue, HookName.BEFORE_ATTACK)
        assert second.kinds.template("trasher").owns(HookName.MODIFY_DAMAGE_TAKEN)


class TestBrewer:
    """酿酒师：强化双方牌桌上的鸭子"""

    def test_buffs_ducks_on_both_tables(self):
        match = make_match()
        brewer = place(match, 0, "brewer")
        duck = place(match, 0, "duck")
        pseudo = place(match, 1, "pseudo_duck")
        dog = place(match, 1, "dog")
        buffed = []
        match.event_bus.subscribe(EventType.CARD_BUFFED, buffed.append)

        assert act(match, brewer, HookName.BEFORE_ATTACK) == 1

        assert (brewer.current_power, brewer.max_power) == (3, 3)
        assert (duck.current_power, duck.max_power) == (3, 3)
        assert (pseudo.current_power, pseudo.max_power) == (4, 4)
        assert (dog.current_power, dog.max_power) == (3, 3)
        assert [e.card for e in buffed] == [brewer, duck, pseudo]
        assert duck.view.signals == ["heal"]

    def test_heals_damaged_duck(self):
        match = make_match()
        brewer = place(match, 0, "brewer")
        duck = place(match, 0, "duck")
        duck.current_power = 1
        act(match, brewer, HookName.BEFORE_ATTACK)
        assert (duck.current_power, duck.max_power) == (3, 3)

    def test_skips_duck_that_stopped_quacking(self):
        match = make_match()
        brewer = place(match, 0, "brewer")
        duck = place(match, 0, "duck")
        pseudo = place(match, 1, "pseudo_duck")
        match.kinds.template("duck").remove_hook(HookName.QUACKS)

        act(match, brewer, HookName.BEFORE_ATTACK)
        assert duck.max_power == 2
        assert brewer.max_power == 2
        assert pseudo.max_power == 4

    def test_no_ducks_is_noop(self):
        match = make_match()
        match.kinds.template("duck").remove_hook(HookName.QUACKS)
        brewer = place(match, 0, "brewer")
        assert act(match, brewer, HookName.BEFORE_ATTACK) == 1
        assert brewer.max_power == 2


class TestNemo:
    """尼莫：变成对面同位置卡牌的种类"""

    def test_becomes_opposing_kind_and_uses_its_ability(self):
        match = make_match()
        nemo = place(match, 0, "nemo")
        brewer = place(match, 1, "brewer")
        rebound = []
        match.event_bus.subscribe(EventType.KIND_REBOUND, rebound.append)

        assert act(match, nemo, HookName.BEFORE_ATTACK) == 1

        assert nemo.kind == "brewer"
        assert nemo.template is match.kinds.template("brewer")
        # 变成酿酒师后自己也是鸭子
        assert (nemo.current_power, nemo.max_power) == (5, 5)
        assert (brewer.current_power, brewer.max_power) == (3, 3)
        assert len(rebound) == 1
        assert nemo.flags == {}

    def test_empty_slot_keeps_kind(self):
        match = make_match()
        nemo = place(match, 0, "nemo")
        assert act(match, nemo, HookName.BEFORE_ATTACK) == 1
        assert nemo.kind == "nemo"

    def test_facing_nemo_terminates(self):
        match = make_match()
        nemo = place(match, 0, "nemo")
        place(match, 1, "nemo")
        assert act(match, nemo, HookName.BEFORE_ATTACK) == 1
        assert nemo.kind == "nemo"
        assert nemo.flags == {}

    def test_mutual_nemos_both_terminate(self):
        match = make_match()
        left = place(match, 0, "nemo")
        right = place(match, 1, "nemo")
        assert act(match, left, HookName.BEFORE_ATTACK) == 1
        assert act(match, right, HookName.BEFORE_ATTACK) == 1

    def test_uses_attack_of_new_kind(self):
        match = make_match()
        nemo = place(match, 0, "nemo")
        place(match, 1, "gatling")
        duck = place(match, 1, "duck")
        act(match, nemo, HookName.BEFORE_ATTACK)

        act(match, nemo, HookName.ATTACK)
        assert duck.current_power == 0

    def test_position_follows_table(self):
        match = make_match()
        place(match, 0, "dog")
        nemo = place(match, 0, "nemo")
        place(match, 1, "brewer")
        act(match, nemo, HookName.BEFORE_ATTACK)
        assert nemo.kind == "nemo"


class TestPseudoDuck:
    """伪鸭：会叫会游的狗"""

    def test_quacks_and_swims(self):
        match = make_match()
        pseudo = place(match, 0, "pseudo_duck")
        assert pseudo.invoke(HookName.QUACKS) == "quack"
        assert pseudo.invoke(HookName.SWIMS) == "float: both;"
