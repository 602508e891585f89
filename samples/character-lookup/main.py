"""
Character Lookup
Finds a Dungeon Fighter character by name and prints its equipment.
Reads NEOPLE_API_KEY from the environment or a .env file.
"""

import asyncio
import sys

from neople import Neople, NeopleApiError


async def lookup(character_name: str, server_id: str = "all") -> None:
    neople = Neople(debug="--debug" in sys.argv)

    try:
        found = await neople.df.search_character(character_name, server_id)
    except NeopleApiError as e:
        if e.status == 0:
            print(f"Could not reach the API: {e.message}")
        else:
            print(f"API error {e.status}: {e.message} {e.response}")
        return

    rows = found.get("rows", [])
    if not rows:
        print(f"No character named {character_name}")
        return

    character = rows[0]
    equipment = await neople.df.get_character_equipment(
        character["serverId"], character["characterId"]
    )
    print(f"{character['characterName']} ({character['serverId']}) Lv.{character['level']}")
    for item in equipment.get("equipment", []):
        print(f"  {item['slotName']}: {item['itemName']}")

    # the same request, for callers with their own HTTP stack
    print(
        neople.df_urls.get_character_equipment(
            character["serverId"], character["characterId"]
        )
    )


if __name__ == "__main__":
    args = [arg for arg in sys.argv[1:] if arg != "--debug"]
    if not args:
        print("usage: main.py <character name> [server id] [--debug]")
        sys.exit(1)
    asyncio.run(lookup(*args[:2]))
