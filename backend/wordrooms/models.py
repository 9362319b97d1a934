from typing import Dict, List, Optional


class Player:
    def __init__(self, player_id: str, ready: bool = False):
        self.id = player_id
        self.ready = ready

    def to_dict(self):
        return {
            'id': self.id,
            'ready': self.ready,
        }


class Room:
    """In-memory state of one game room.

    ``players`` keeps join order. ``scores`` holds one entry per current
    player; both are only mutated through the methods below so they stay in
    sync.
    """

    def __init__(self, code: str, host_id: str, word_to_guess: str):
        self.code = code
        self.players: List[Player] = [Player(host_id)]
        self.word_to_guess = word_to_guess
        self.started = False
        self.scores: Dict[str, int] = {host_id: 0}

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def has_player(self, player_id: str) -> bool:
        return self.get_player(player_id) is not None

    def add_player(self, player_id: str) -> Player:
        player = Player(player_id)
        self.players.append(player)
        self.scores[player_id] = 0
        return player

    def remove_player(self, player_id: str) -> bool:
        player = self.get_player(player_id)
        if player is None:
            return False
        self.players.remove(player)
        self.scores.pop(player_id, None)
        return True

    def all_ready(self) -> bool:
        return all(p.ready for p in self.players)

    def reset_readiness(self) -> None:
        for player in self.players:
            player.ready = False

    def award_win(self, player_id: str) -> int:
        self.scores[player_id] = self.scores.get(player_id, 0) + 1
        return self.scores[player_id]

    def serialize_players(self):
        return [p.to_dict() for p in self.players]

    def to_dict(self):
        # The target word is never exposed outside the socket protocol
        return {
            'code': self.code,
            'started': self.started,
            'players': self.serialize_players(),
            'scores': dict(self.scores),
        }
