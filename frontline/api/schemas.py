"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Snapshots mirror the engine dataclasses field for field and are built
straight from them (from_attributes). GameStateSnapshot.to_state()
rehydrates an unredacted snapshot back into a GameState.

Error Codes:
- GAME_NOT_ACTIVE: Match already finished
- NOT_YOUR_TURN: Action submitted by the player who is not current
- UNKNOWN_ACTION: Action type not recognized
- INVALID_PAYLOAD: Action data malformed
- ILLEGAL_ACTION: Rule precondition not met
- HANDLER_ERROR: Engine fault; state was rolled back
- MATCH_NOT_FOUND: Match does not exist or was removed
- UNKNOWN_FACTION: Faction slug not registered
"""

from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, Field

from ..engine_core.action import ActionType, GameAction
from ..engine_core.constants import MAX_DECK_SIZE, MIN_DECK_SIZE
from ..engine_core.state import (
    Commander,
    CommanderAbility,
    CommanderEffect,
    GamePhase,
    GameState,
    GameStatus,
    PlayerState,
)
from ..engine_core.units import (
    Ability,
    AbilityCondition,
    AbilityEffect,
    AbilityType,
    BoardPosition,
    BoardRow,
    Card,
    ConditionType,
    DamageType,
    EffectTarget,
    EffectType,
    Unit,
    coerce_enum,
)


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_ACTIVE = "GAME_NOT_ACTIVE"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    UNKNOWN_ACTION = "UNKNOWN_ACTION"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    ILLEGAL_ACTION = "ILLEGAL_ACTION"
    HANDLER_ERROR = "HANDLER_ERROR"
    MATCH_NOT_FOUND = "MATCH_NOT_FOUND"
    UNKNOWN_FACTION = "UNKNOWN_FACTION"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


HIDDEN_CARD_ID = "hidden"


# =============================================================================
# Cards and units
# =============================================================================

class AbilityConditionSnapshot(BaseModel):
    type: ConditionType
    value: Optional[Any] = None

    model_config = {"from_attributes": True}


class AbilityEffectSnapshot(BaseModel):
    type: EffectType
    target: EffectTarget
    value: Union[int, str]
    description: str = ""

    model_config = {"from_attributes": True}


class AbilitySnapshot(BaseModel):
    id: str
    name: str
    type: Union[AbilityType, str]
    effect: AbilityEffectSnapshot
    condition: Optional[AbilityConditionSnapshot] = None
    description: str = ""

    model_config = {"from_attributes": True}

    def to_ability(self) -> Ability:
        return Ability(
            id=self.id,
            name=self.name,
            type=coerce_enum(AbilityType, self.type),
            effect=AbilityEffect(
                type=self.effect.type,
                target=self.effect.target,
                value=self.effect.value,
                description=self.effect.description,
            ),
            condition=(
                AbilityCondition(type=self.condition.type, value=self.condition.value)
                if self.condition else None
            ),
            description=self.description,
        )


class CardSnapshot(BaseModel):
    """Card template information."""
    id: str
    name: str
    faction: str
    base_health: int
    base_morale: int
    delay: int
    damage_type: DamageType
    abilities: list[AbilitySnapshot] = Field(default_factory=list)
    description: str = ""
    rarity: str = "common"

    model_config = {"from_attributes": True}

    def to_card(self) -> Card:
        return Card(
            id=self.id,
            name=self.name,
            faction=self.faction,
            base_health=self.base_health,
            base_morale=self.base_morale,
            delay=self.delay,
            damage_type=self.damage_type,
            abilities=tuple(a.to_ability() for a in self.abilities),
            description=self.description,
            rarity=self.rarity,
        )


class BoardPositionSnapshot(BaseModel):
    row: BoardRow
    slot: int

    model_config = {"from_attributes": True}


class UnitSnapshot(BaseModel):
    """A live unit. `hidden` marks an opponent's redacted face-down unit."""
    id: str
    card_id: str
    name: str
    base_health: int
    current_health: int
    base_morale: int
    current_morale: int
    delay: int
    damage_type: DamageType
    owner_id: str
    abilities: list[AbilitySnapshot] = Field(default_factory=list)
    position: Optional[BoardPositionSnapshot] = None
    turns_in_reserve: int = 0
    face_down: bool = True
    hidden: bool = False

    model_config = {"from_attributes": True}

    def redacted(self) -> "UnitSnapshot":
        """Keep only what the opponent may see of a face-down unit."""
        return UnitSnapshot(
            id=self.id,
            card_id=HIDDEN_CARD_ID,
            name="Face-down unit",
            base_health=0,
            current_health=0,
            base_morale=0,
            current_morale=0,
            delay=0,
            damage_type=DamageType.HEALTH,
            owner_id=self.owner_id,
            position=self.position,
            turns_in_reserve=self.turns_in_reserve,
            face_down=True,
            hidden=True,
        )

    def to_unit(self) -> Unit:
        return Unit(
            id=self.id,
            card_id=self.card_id,
            name=self.name,
            base_health=self.base_health,
            current_health=self.current_health,
            base_morale=self.base_morale,
            current_morale=self.current_morale,
            delay=self.delay,
            damage_type=self.damage_type,
            owner_id=self.owner_id,
            abilities=[a.to_ability() for a in self.abilities],
            position=(
                BoardPosition(row=self.position.row, slot=self.position.slot)
                if self.position else None
            ),
            turns_in_reserve=self.turns_in_reserve,
            face_down=self.face_down,
        )


# =============================================================================
# Commanders and players
# =============================================================================

class CommanderEffectSnapshot(BaseModel):
    type: str
    value: Optional[Any] = None

    model_config = {"from_attributes": True}


class CommanderAbilitySnapshot(BaseModel):
    id: str
    name: str
    cooldown: int
    effect: CommanderEffectSnapshot
    description: str = ""
    current_cooldown: int = 0

    model_config = {"from_attributes": True}


class CommanderSnapshot(BaseModel):
    """Commander information."""
    id: str
    name: str
    faction: str
    ability: CommanderAbilitySnapshot

    model_config = {"from_attributes": True}

    def to_commander(self) -> Commander:
        ability = self.ability
        return Commander(
            id=self.id,
            name=self.name,
            faction=self.faction,
            ability=CommanderAbility(
                id=ability.id,
                name=ability.name,
                cooldown=ability.cooldown,
                effect=CommanderEffect(type=ability.effect.type, value=ability.effect.value),
                description=ability.description,
                current_cooldown=ability.current_cooldown,
            ),
        )


class PlayerSnapshot(BaseModel):
    """Player state. hand_count/deck_count survive redaction."""
    player_id: str
    name: str
    commander: CommanderSnapshot
    overall_army_morale: int
    max_overall_army_morale: int
    deck: list[CardSnapshot] = Field(default_factory=list)
    hand: list[CardSnapshot] = Field(default_factory=list)
    discard_pile: list[CardSnapshot] = Field(default_factory=list)
    front_line: list[Optional[UnitSnapshot]] = Field(default_factory=list)
    reinforcement_row: list[Optional[UnitSnapshot]] = Field(default_factory=list)
    has_played_unit_this_turn: bool = False
    has_deployed_this_turn: bool = False
    has_used_commander_this_turn: bool = False
    has_mulliganed: bool = False
    hand_count: int = 0
    deck_count: int = 0

    model_config = {"from_attributes": True}

    @classmethod
    def from_player(cls, player: PlayerState) -> "PlayerSnapshot":
        snapshot = cls.model_validate(player)
        snapshot.hand_count = len(player.hand)
        snapshot.deck_count = len(player.deck)
        return snapshot

    def redacted(self) -> "PlayerSnapshot":
        """Hide hand, deck and face-down reserve identities."""
        return self.model_copy(update={
            "hand": [],
            "deck": [],
            "reinforcement_row": [
                unit.redacted() if unit is not None and unit.face_down else unit
                for unit in self.reinforcement_row
            ],
        })

    def to_player(self) -> PlayerState:
        return PlayerState(
            player_id=self.player_id,
            name=self.name,
            commander=self.commander.to_commander(),
            overall_army_morale=self.overall_army_morale,
            max_overall_army_morale=self.max_overall_army_morale,
            deck=[c.to_card() for c in self.deck],
            hand=[c.to_card() for c in self.hand],
            discard_pile=[c.to_card() for c in self.discard_pile],
            front_line=[u.to_unit() if u else None for u in self.front_line],
            reinforcement_row=[u.to_unit() if u else None for u in self.reinforcement_row],
            has_played_unit_this_turn=self.has_played_unit_this_turn,
            has_deployed_this_turn=self.has_deployed_this_turn,
            has_used_commander_this_turn=self.has_used_commander_this_turn,
            has_mulliganed=self.has_mulliganed,
        )


class ActionSnapshot(BaseModel):
    type: Union[ActionType, str]
    player_id: str
    data: dict[str, Any] = Field(default_factory=dict)
    timestamp: float = 0.0

    model_config = {"from_attributes": True}

    def to_action(self) -> GameAction:
        return GameAction(
            type=coerce_enum(ActionType, self.type),
            player_id=self.player_id,
            data=dict(self.data),
            timestamp=self.timestamp,
        )


class GameStateSnapshot(BaseModel):
    """
    Complete match state.

    Built with from_state(); for_viewer() gives the view one player may
    see; to_state() rehydrates an unredacted snapshot.
    """
    game_id: str
    players: list[PlayerSnapshot]
    current_player_idx: int
    turn: int
    phase: GamePhase
    status: GameStatus
    winner: Optional[str] = None
    last_action: Optional[ActionSnapshot] = None
    created_at: float = 0.0
    updated_at: float = 0.0
    random_seed: int = 0
    shuffle_count: int = 0
    next_unit_number: int = 1
    viewer: Optional[str] = Field(None, description="Player this view is redacted for")
    api_version: str = "v1"

    model_config = {"from_attributes": True}

    @classmethod
    def from_state(cls, state: GameState) -> "GameStateSnapshot":
        return cls(
            game_id=state.game_id,
            players=[PlayerSnapshot.from_player(p) for p in state.players],
            current_player_idx=state.current_player_idx,
            turn=state.turn,
            phase=state.phase,
            status=state.status,
            winner=state.winner,
            last_action=(
                ActionSnapshot.model_validate(state.last_action)
                if state.last_action is not None else None
            ),
            created_at=state.created_at,
            updated_at=state.updated_at,
            random_seed=state.random_seed,
            shuffle_count=state.shuffle_count,
            next_unit_number=state.next_unit_number,
        )

    @property
    def current_player_id(self) -> str:
        return self.players[self.current_player_idx].player_id

    def for_viewer(self, player_id: str) -> "GameStateSnapshot":
        """The snapshot as player_id may see it: opponents are redacted."""
        return self.model_copy(update={
            "players": [
                p if p.player_id == player_id else p.redacted()
                for p in self.players
            ],
            "viewer": player_id,
        })

    def to_state(self) -> GameState:
        if self.viewer is not None:
            raise ValueError("A redacted snapshot cannot be rehydrated")
        return GameState(
            game_id=self.game_id,
            players=[p.to_player() for p in self.players],
            current_player_idx=self.current_player_idx,
            turn=self.turn,
            phase=self.phase,
            status=self.status,
            winner=self.winner,
            last_action=self.last_action.to_action() if self.last_action else None,
            created_at=self.created_at,
            updated_at=self.updated_at,
            random_seed=self.random_seed,
            shuffle_count=self.shuffle_count,
            next_unit_number=self.next_unit_number,
        )


# =============================================================================
# Request Models
# =============================================================================

class CreateMatchRequest(BaseModel):
    """Request to create a new match."""
    player_names: list[str] = Field(
        ..., min_length=2, max_length=2, description="Display names of the two players"
    )
    faction: str = Field("ashen_legion", description="Faction slug both decks are built from")
    commander_ids: Optional[list[str]] = Field(
        None, description="One commander id per player (defaults to the faction's first two)"
    )
    deck_size: int = Field(MIN_DECK_SIZE, ge=MIN_DECK_SIZE, le=MAX_DECK_SIZE)
    random_seed: Optional[int] = Field(None, description="Seed for reproducible matches")


class ActionRequest(BaseModel):
    """A GameAction in wire form."""
    type: str = Field(..., description="playUnit, deployUnit, useCommander, drawCard, endTurn, surrender, mulligan")
    player_id: str = Field(..., alias="playerId")
    data: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    def to_action(self) -> GameAction:
        return GameAction.from_dict({
            "type": self.type,
            "playerId": self.player_id,
            "data": self.data,
        })


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class MatchResponse(BaseModel):
    """Response containing a match."""
    match_id: str
    status: GameStatus
    current_player_id: str
    turn: int
    winner: Optional[str] = None
    game_state: GameStateSnapshot
    api_version: str = "v1"


class ActionResponse(BaseModel):
    """Response after an accepted action."""
    match_id: str
    success: bool = True
    changes: list[str] = Field(default_factory=list)
    game_state: GameStateSnapshot
    api_version: str = "v1"


class CatalogResponse(BaseModel):
    """One faction's cards and commanders."""
    faction: str
    name: str
    cards: list[CardSnapshot] = Field(default_factory=list)
    commanders: list[CommanderSnapshot] = Field(default_factory=list)
    api_version: str = "v1"


class CatalogListResponse(BaseModel):
    factions: list[CatalogResponse]
    api_version: str = "v1"


class MatchListResponse(BaseModel):
    """Response listing active matches."""
    matches: list[str]
    count: int


class EndMatchResponse(BaseModel):
    """Response after ending a match."""
    success: bool
    match_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
