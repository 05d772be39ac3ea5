"""
Player routes: playlists, devices, search, play, stop.

All of them require a logged-in client (see ``require_player``).
"""

import logging

from flask import jsonify

from spotaddon.routes import main, require_player, text_response
from spotaddon.schemas import PlayRequest, SearchRequest, StopRequest
from spotaddon.services import PlayerService

logger = logging.getLogger(__name__)


@main.route("/playlists")
@require_player()
def playlists(client=None, params=None):
    """List the current user's playlists."""
    return jsonify(PlayerService(client).get_playlists())


@main.route("/devices")
@require_player()
def devices(client=None, params=None):
    """List the user's Spotify Connect devices."""
    return jsonify(PlayerService(client).get_devices())


@main.route("/search")
@require_player(SearchRequest, "Query parameter is required")
def search(client=None, params=None):
    """Search tracks by free text."""
    return jsonify(PlayerService(client).search_tracks(params.query))


@main.route("/play", methods=["GET", "POST"])
@require_player(PlayRequest, "URI and deviceId are required")
def play(client=None, params=None):
    """Start playback of a context URI on a device."""
    PlayerService(client).play(params.uri, params.device_id)
    return text_response("Playback started successfully")


@main.route("/stop", methods=["GET", "POST"])
@require_player(StopRequest, "deviceId is required")
def stop(client=None, params=None):
    """Pause playback on a device."""
    PlayerService(client).stop(params.device_id)
    return text_response("Playback stopped successfully")
