"""Static UI strings for the three supported languages."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Language(str, Enum):
    """Supported UI languages. Korean is the primary language."""

    KO = "ko"
    ZH = "zh"
    EN = "en"

    @classmethod
    def parse(cls, value: "str | Language | None") -> "Language":
        """Return the matching language, falling back to Korean."""
        try:
            return cls(value)
        except ValueError:
            return cls.KO

    @property
    def button_label(self) -> str:
        return _BUTTON_LABELS[self]


_BUTTON_LABELS = {
    Language.KO: "한국어",
    Language.ZH: "中文",
    Language.EN: "EN",
}


class Translations(BaseModel):
    """Every user-visible string in one language."""

    model_config = ConfigDict(frozen=True)

    # Shell
    app_title: str
    nav_search: str
    nav_favorites: str
    footer_text: str

    # Search screen
    search_placeholder: str
    search_button: str
    add_favorite_button: str
    preview_title: str
    preview_hint: str
    searching: str

    # Weather card
    no_result: str
    temperature: str
    humidity: str
    wind: str

    # Favorites screen
    favorites_title: str
    favorites_empty: str
    memo_placeholder: str
    delete: str
    clear_all: str


TRANSLATIONS: dict[Language, Translations] = {
    Language.KO: Translations(
        app_title="WeatherNow 날씨 조회",
        nav_search="날씨 검색",
        nav_favorites="즐겨찾기 도시",
        footer_text="WeatherNow © 2025",
        search_placeholder="도시 이름을 영어로 입력하세요 (예: Seoul, Tokyo)",
        search_button="검색",
        add_favorite_button="현재 도시 즐겨찾기에 추가",
        preview_title="즐겨찾기 도시 (미리보기)",
        preview_hint='자세히 보려면 위의 "즐겨찾기 도시" 메뉴를 선택하세요.',
        searching="검색 중...",
        no_result="검색 결과 없음",
        temperature="온도",
        humidity="습도",
        wind="풍속",
        favorites_title="즐겨찾기 도시 관리",
        favorites_empty="아직 추가된 즐겨찾기 도시가 없습니다.",
        memo_placeholder="메모를 입력하세요 (예: 여행, 고향, 친구 집)",
        delete="삭제",
        clear_all="전체 삭제",
    ),
    Language.ZH: Translations(
        app_title="WeatherNow 天气查询",
        nav_search="天气查询",
        nav_favorites="收藏城市",
        footer_text="WeatherNow © 2025",
        search_placeholder="请输入城市英文名称（例如：Seoul, Tokyo）",
        search_button="搜索",
        add_favorite_button="将当前城市加入收藏",
        preview_title="收藏城市（预览）",
        preview_hint="如需更多操作，请点击上方的“收藏城市”菜单。",
        searching="查询中...",
        no_result="暂无结果",
        temperature="温度",
        humidity="湿度",
        wind="风速",
        favorites_title="收藏城市管理",
        favorites_empty="还没有添加任何收藏城市。",
        memo_placeholder="请输入备注（例如：旅行、家乡、朋友在这里）",
        delete="删除",
        clear_all="清空全部",
    ),
    Language.EN: Translations(
        app_title="WeatherNow Weather Search",
        nav_search="Weather Search",
        nav_favorites="Favorite Cities",
        footer_text="WeatherNow © 2025",
        search_placeholder="Enter city name in English (e.g. Seoul, Tokyo)",
        search_button="Search",
        add_favorite_button="Add current city to favorites",
        preview_title="Favorite Cities (Preview)",
        preview_hint='For more actions, open the "Favorite Cities" page above.',
        searching="Searching...",
        no_result="No result",
        temperature="Temperature",
        humidity="Humidity",
        wind="Wind speed",
        favorites_title="Favorite Cities",
        favorites_empty="No favorite cities yet.",
        memo_placeholder="Add a note (e.g. trip, hometown, friend lives here)",
        delete="Delete",
        clear_all="Clear all",
    ),
}


def get_translations(lang: "str | Language | None") -> Translations:
    """Look up the string table for ``lang``; unknown codes get Korean."""
    return TRANSLATIONS[Language.parse(lang)]
