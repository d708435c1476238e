"""Internationalization support for the terminal UI.

Usage:
    from mahjong_rules.ui.i18n import t, set_language

    set_language("en")            # Switch to English
    t("msg.round_start")          # -> "Round start!"
    t("board.remaining", n=70)    # -> "70 tiles left"
"""

TRANSLATIONS = {
    "zh": {
        "menu.subtitle": "摸牌 / 打牌 / 鸣牌判定",
        "menu.choose_mode": "选择模式:",
        "menu.play": "坐东家对战三家随机打牌",
        "menu.watch": "观战 (四家随机打牌)",
        "menu.quit": "退出",
        "menu.prompt": "请选择 (0-2): ",
        "menu.seed": "随机种子 (留空随机): ",
        "menu.goodbye": "再见!",
        "menu.exited": "游戏已退出",
        "name.you": "你",
        "name.cpu": "电脑{seat}",
        "msg.round_start": "开局!",
        "msg.deal_failed": "发牌失败: {error}",
        "msg.log_saved": "日志已保存: {path}",
        "msg.invalid_input": "无效输入",
        "msg.press_enter": "按回车继续...",
        "board.remaining": "剩余 {n} 张",
        "board.seat": "座位",
        "board.player": "玩家",
        "board.melds": "副露",
        "board.discards": "弃牌",
        "input.discard": "打哪张? (0 = 摸到的牌, 1-{n} = 手牌): ",
        "draw.exhaustive": "流局",
        "draw.detail": "牌山摸完, 共摸 {turns} 次 (剩余 {remaining} 张)",
    },
    "en": {
        "menu.subtitle": "draw / discard / claim checks",
        "menu.choose_mode": "Choose mode:",
        "menu.play": "Play as East against three random players",
        "menu.watch": "Watch (four random players)",
        "menu.quit": "Quit",
        "menu.prompt": "Select (0-2): ",
        "menu.seed": "Random seed (blank for random): ",
        "menu.goodbye": "Goodbye!",
        "menu.exited": "Game exited",
        "name.you": "You",
        "name.cpu": "CPU {seat}",
        "msg.round_start": "Round start!",
        "msg.deal_failed": "Deal failed: {error}",
        "msg.log_saved": "Log saved: {path}",
        "msg.invalid_input": "Invalid input",
        "msg.press_enter": "Press Enter to continue...",
        "board.remaining": "{n} tiles left",
        "board.seat": "Seat",
        "board.player": "Player",
        "board.melds": "Melds",
        "board.discards": "Discards",
        "input.discard": "Discard which? (0 = drawn tile, 1-{n} = hand): ",
        "draw.exhaustive": "Exhaustive draw",
        "draw.detail": "wall exhausted after {turns} draws ({remaining} left)",
    },
}


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "zh"

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language."""
        if lang not in TRANSLATIONS:
            raise ValueError(f"unsupported language: {lang!r}")
        cls._lang = lang

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        text = TRANSLATIONS[cls._lang].get(key, key)
        if kwargs:
            return text.format(**kwargs)
        return text

    @classmethod
    def get_language(cls) -> str:
        """Get the current language code."""
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    """Set the active language."""
    I18n.set_language(lang)


def get_language() -> str:
    """Get the current language code."""
    return I18n.get_language()
