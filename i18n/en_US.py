"""English translation table."""

STRINGS: dict[str, str] = {
    # ── Card kinds ──
    "kind.card.name": "Card",
    "kind.creature.name": "Creature",
    "kind.duck.name": "Peaceful Duck",
    "kind.dog.name": "Bandit Dog",
    "kind.trasher.name": "Trasher",
    "kind.gatling.name": "Gatling",
    "kind.lad.name": "Lad",
    "kind.rogue.name": "Rogue",
    "kind.brewer.name": "Brewer",
    "kind.pseudo_duck.name": "Pseudo Duck",
    "kind.nemo.name": "Nemo",

    # ── Classification ──
    "class.duck": "Duck",
    "class.dog": "Dog",
    "class.duck_dog": "Duck-Dog",
    "class.creature": "Creature",

    # ── Traits ──
    "trait.lineage": "{chain}",
    "trait.trasher": "Takes 1 less damage",
    "trait.gatling": "Deals 2 damage to every opposing card when attacking",
    "trait.lad": "The more of them, the stronger they are",
    "trait.rogue": "Steals damage abilities from opposing kinds before attacking",
    "trait.brewer": "Before attacking, every duck gains 1 max power and heals 2",
    "trait.nemo": "Turns into the kind of the opposing card before attacking",

    # ── Players ──
    "player.sheriff": "Sheriff",
    "player.bandit": "Bandit",

    # ── Match log ──
    "log.game_start": "Match started: {first} vs {second}",
    "log.turn_start": "Turn {turn}: {player}",
    "log.card_played": "{player} plays {card}",
    "log.card_removed": "{card} leaves play",
    "log.damage": "{target} takes {damage} damage from {source} [{old}→{new}/{max}]",
    "log.player_damage": "{player} takes {damage} damage from {source} [{old}→{new}]",
    "log.hooks_stolen": "{thief} stole {hooks} from [{kind}]",
    "log.rebound": "{card} turned into [{kind}]",
    "log.buffed": "{brewer} strengthens {card} [{power}/{max}]",

    # ── Results ──
    "game.winner": "{name} wins!",
    "game.stalemate": "Stalemate!",
    "game.in_progress": "Match in progress",

    # ── Exceptions ──
    "exc.game_error": "Game error",
    "exc.task_queue": "Task queue misuse",
    "exc.task_queue_running": "Task queue already started, cannot push new steps",
    "exc.task_queue_started": "Task queue already started",
    "exc.task_queue_stalled": "Task queue did not finish in time",
    "exc.unknown_kind": "Unknown card kind",
    "exc.invalid_config": "Invalid configuration",
    "exc.match_state": "Invalid match state",
    "exc.match_started": "Match already started",

    # ── Board view ──
    "view.title": "Turn {turn}",
    "view.player": "{name}  power {power}/{max}  deck {deck}",
    "view.empty": "(empty)",
    "view.card": "{name} {power}/{max}",
    "view.result": "Result",

    # ── main.py ──
    "main.presets": "Available deck presets:",
    "main.unknown_preset": "Unknown deck preset: {name}",
    "main.interrupted": "\n\nMatch interrupted, bye!",
    "main.error": "\nError: {error}",
}
