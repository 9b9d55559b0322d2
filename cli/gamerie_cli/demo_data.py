"""Demo catalogue used when no Gamerie server is configured."""

from gamerie_cli.search.models import GameMatch, PlayerMatch, TeamMatch

_UNSPLASH = "https://images.unsplash.com/{photo}?auto=format&fit=crop&q=80&w=200"

DEMO_GAMES: tuple[GameMatch, ...] = (
    GameMatch(
        id="valorant",
        display_name="Valorant",
        thumbnail=_UNSPLASH.format(photo="photo-1542751371-adc38448a05e"),
        subtitle="Tactical Shooter",
    ),
    GameMatch(
        id="lol",
        display_name="League of Legends",
        thumbnail=_UNSPLASH.format(photo="photo-1511512578047-dfb367046420"),
        subtitle="MOBA",
    ),
    GameMatch(
        id="dota2",
        display_name="Dota 2",
        thumbnail=_UNSPLASH.format(photo="photo-1538481199705-c710c4e965fc"),
        subtitle="MOBA",
    ),
    GameMatch(
        id="cs2",
        display_name="Counter-Strike 2",
        thumbnail=_UNSPLASH.format(photo="photo-1552820728-8b83bb6b773f"),
        subtitle="Tactical Shooter",
    ),
    GameMatch(
        id="wow",
        display_name="World of Warcraft",
        thumbnail=_UNSPLASH.format(photo="photo-1550745165-9bc0b252726f"),
        subtitle="MMORPG",
    ),
    GameMatch(
        id="dragon-ball-fighterz",
        display_name="Dragon Ball FighterZ",
        thumbnail=_UNSPLASH.format(photo="photo-1493711662062-fa541adb3fc8"),
        subtitle="Fighting",
    ),
)

DEMO_TEAMS: tuple[TeamMatch, ...] = (
    TeamMatch(
        id="team-1",
        display_name="Athens Headhunters",
        logo=_UNSPLASH.format(photo="photo-1560253023-3ec5d502959f"),
        member_count=5,
    ),
    TeamMatch(
        id="team-2",
        display_name="Night Owls Esports",
        logo=_UNSPLASH.format(photo="photo-1614680376593-902f74cf0d41"),
        member_count=4,
    ),
    TeamMatch(
        id="team-3",
        display_name="Sakura Valor",
        logo=_UNSPLASH.format(photo="photo-1579373903781-fd5c0c30c4cd"),
        member_count=6,
    ),
    TeamMatch(
        id="team-4",
        display_name="Arctic Wolves",
        logo=_UNSPLASH.format(photo="photo-1589254065878-42c9da997008"),
        member_count=5,
    ),
)

DEMO_PLAYERS: tuple[PlayerMatch, ...] = (
    PlayerMatch(
        id="user-1",
        display_name="Manos550",
        avatar=_UNSPLASH.format(photo="photo-1566492031773-4f4e44671857"),
        title="Pro Gamer",
    ),
    PlayerMatch(
        id="user-2",
        display_name="NightStalker",
        avatar=_UNSPLASH.format(photo="photo-1527980965255-d3b416303d12"),
        title="Elite Streamer",
    ),
    PlayerMatch(
        id="user-3",
        display_name="SakuraPro",
        avatar=_UNSPLASH.format(photo="photo-1494790108377-be9c29b29330"),
        title="Tournament Champion",
    ),
    PlayerMatch(
        id="user-4",
        display_name="ArcticWolf",
        avatar=_UNSPLASH.format(photo="photo-1507003211169-0a1dd7228f2d"),
        title="Rising Star",
    ),
    PlayerMatch(
        id="user-5",
        display_name="PixelQueen",
        avatar=_UNSPLASH.format(photo="photo-1438761681033-6461ffad8d80"),
        title="Content Creator",
    ),
    PlayerMatch(
        id="user-6",
        display_name="DragonHeart",
        avatar=_UNSPLASH.format(photo="photo-1500648767791-00dcc994a43e"),
        title="Fighting Game Specialist",
    ),
)
