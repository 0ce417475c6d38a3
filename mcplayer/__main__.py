import argparse
import asyncio
from pathlib import Path
from typing import Optional

from .errors import NoCustomSkinError, PlayerError
from .logger import log_stream_handler, logger
from .mojang_api import MojangClient
from .player import PlayerIdentity


async def lookup(
    args: argparse.Namespace, client: Optional[MojangClient] = None
) -> None:
    if args.uuid:
        player = PlayerIdentity(uuid=args.player, client=client)
    else:
        player = PlayerIdentity(name=args.player, client=client)

    uuid = await player.resolve_uuid()
    name = await player.resolve_name()
    print(f"name: {name}")
    print(f"uuid: {uuid}")

    try:
        print(f"skin: {await player.get_skin_url()}")
    except NoCustomSkinError:
        print("skin: none")

    try:
        cape = await player.get_cape_url()
    except NoCustomSkinError:
        cape = None
    if cape:
        print(f"cape: {cape}")

    if args.history:
        for entry in await player.resolve_name_history():
            print(f"  {entry.name} {entry.changed_to_at or ''}".rstrip())

    if args.skin:
        args.skin.write_bytes(await player.get_skin())
        logger.info(f"Skin of {name} written to {args.skin}")

    if args.head:
        args.head.write_bytes(await player.get_head())
        logger.info(f"Head of {name} written to {args.head}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mcplayer")
    parser.add_argument("player", type=str, help="player name, or UUID with --uuid")
    parser.add_argument("--uuid", action="store_true")
    parser.add_argument("--history", action="store_true")
    parser.add_argument("--skin", type=Path)
    parser.add_argument("--head", type=Path)
    return parser.parse_args(argv)


def main():
    args = parse_args()

    if log_stream_handler not in logger.handlers:
        logger.addHandler(log_stream_handler)

    try:
        asyncio.run(lookup(args))
    except PlayerError as e:
        logger.error(f"{type(e).__name__}: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
