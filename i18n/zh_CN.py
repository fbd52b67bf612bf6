"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── 卡牌种类 ──
    "kind.card.name": "卡牌",
    "kind.creature.name": "生物",
    "kind.duck.name": "和平鸭",
    "kind.dog.name": "强盗狗",
    "kind.trasher.name": "打手",
    "kind.gatling.name": "加特林",
    "kind.lad.name": "小弟",
    "kind.rogue.name": "浪人",
    "kind.brewer.name": "酿酒师",
    "kind.pseudo_duck.name": "伪鸭",
    "kind.nemo.name": "尼莫",
    # ── 生物分类 ──
    "class.duck": "鸭子",
    "class.dog": "狗",
    "class.duck_dog": "鸭狗",
    "class.creature": "生物",
    # ── 能力描述 ──
    "trait.lineage": "{chain}",
    "trait.trasher": "受到的伤害减少 1 点",
    "trait.gatling": "攻击时对每张敌方卡牌造成 2 点伤害",
    "trait.lad": "数量越多，越强大",
    "trait.rogue": "攻击前夺走敌方卡牌种类的伤害能力",
    "trait.brewer": "攻击前为场上所有鸭子提升 1 点上限并恢复 2 点力量",
    "trait.nemo": "攻击前变成对面卡牌的种类",
    # ── 玩家 ──
    "player.sheriff": "警长",
    "player.bandit": "强盗",
    # ── 对局日志 ──
    "log.game_start": "对局开始: {first} 对阵 {second}",
    "log.turn_start": "第 {turn} 回合: {player}",
    "log.card_played": "{player} 打出了 {card}",
    "log.card_removed": "{card} 离场",
    "log.damage": "{target} 受到 {source} 的 {damage} 点伤害 [{old}→{new}/{max}]",
    "log.player_damage": "{player} 受到 {source} 的 {damage} 点伤害 [{old}→{new}]",
    "log.hooks_stolen": "{thief} 从【{kind}】夺走了 {hooks}",
    "log.rebound": "{card} 变成了【{kind}】",
    "log.buffed": "{brewer} 让 {card} 变得更强 [{power}/{max}]",
    # ── 对局结果 ──
    "game.winner": "{name} 获胜！",
    "game.stalemate": "平局！",
    "game.in_progress": "对局进行中",
    # ── 异常 ──
    "exc.game_error": "游戏错误",
    "exc.task_queue": "任务队列使用错误",
    "exc.task_queue_running": "任务队列已启动，不能再加入新步骤",
    "exc.task_queue_started": "任务队列已启动，不能重复启动",
    "exc.task_queue_stalled": "任务队列超时未完成",
    "exc.unknown_kind": "未知的卡牌种类",
    "exc.invalid_config": "配置无效",
    "exc.match_state": "对局状态错误",
    "exc.match_started": "对局已经开始",
    # ── 牌桌视图 ──
    "view.title": "第 {turn} 回合",
    "view.player": "{name}  力量 {power}/{max}  牌组 {deck}",
    "view.empty": "（空）",
    "view.card": "{name} {power}/{max}",
    "view.result": "对局结果",
    # ── main.py ──
    "main.presets": "可用的预设牌组:",
    "main.unknown_preset": "未知的预设牌组: {name}",
    "main.interrupted": "\n\n对局被中断，再见！",
    "main.error": "\n发生错误: {error}",
}
