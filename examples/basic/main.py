"""Fetch a profile and recent cycles with a static token, or print an OAuth authorization URL.

Run with WHOOP_ACCESS_TOKEN set for the first mode, or WHOOP_CLIENT_ID /
WHOOP_CLIENT_SECRET / WHOOP_REDIRECT_URI for the second.
"""

import asyncio
import os

from pydantic import ValidationError

from whoopkit import (
    ClientSettings,
    CycleQuery,
    OAuthSession,
    OAuthSettings,
    Scope,
    WhoopClient,
    WhoopError,
    generate_state_token,
)


async def show_recent_cycles() -> None:
    async with WhoopClient.from_settings(ClientSettings()) as client:
        try:
            profile = await client.get_profile_basic()
            print(f"User: {profile.first_name} {profile.last_name} <{profile.email}>")
        except WhoopError as e:
            print(f"Error fetching profile: {e}")

        try:
            page = await client.list_cycles(CycleQuery(limit=5))
        except WhoopError as e:
            print(f"Error fetching cycles: {e}")
            return

        for cycle in page.records or []:
            print(f"  Cycle {cycle.id}: {cycle.start.isoformat()}")
            if cycle.score is not None:
                print(f"    Strain: {cycle.score.strain:.2f}")


def show_authorization_url() -> None:
    try:
        settings = OAuthSettings()  # type: ignore[call-arg]
    except ValidationError as e:
        print(f"OAuth settings incomplete: {e}")
        return

    session = OAuthSession(
        settings,
        scopes={Scope.READ_PROFILE, Scope.READ_CYCLES, Scope.READ_SLEEP, Scope.OFFLINE},
    )
    print(f"Visit this URL to authorize: {session.build_authorization_url(state=generate_state_token())}")
    # After the redirect:
    #   client = await WhoopClient.from_authorization_code(session, code)


if __name__ == "__main__":
    if os.environ.get("WHOOP_ACCESS_TOKEN"):
        asyncio.run(show_recent_cycles())
    else:
        show_authorization_url()
