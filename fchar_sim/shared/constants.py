"""
#WHERE
    Imported by every fchar_sim module and by the tests; single source of
    truth for the asset record layout.

#WHAT
    Record-kind tags, table strides and positional field indices of the
    .fchar record tree.  The layout is defined by the asset format; edit
    here, not in individual module files.

#INPUT / #OUTPUT
    Pure constants, no I/O.
"""

# ── Data tables (entries of CharacterAsset.data_id_table) ────────────────

HURT_BOX: str = "HurtBox"
STRIKE_BOX: str = "StrikeBox"
PROXIMITY_BOX: str = "ProximityBox"
THROW_HURT_BOX: str = "ThrowHurtBox"
TRIGGER: str = "Trigger"
TRIGGER_GROUP: str = "TriggerGroup"

# Records per entry in a table's flat data_rsz array
BOX_STRIDE: int = 6
TRIGGER_STRIDE: int = 17
TRIGGER_GROUP_STRIDE: int = 1

# ── Timeline record kinds ────────────────────────────────────────────────

PUSH_COLLISION_KEY: str = "CharacterAsset.PushCollisionKey"
DAMAGE_COLLISION_KEY: str = "CharacterAsset.DamageCollisionKey"
ATTACK_COLLISION_KEY: str = "CharacterAsset.AttackCollisionKey"
TRIGGER_KEY: str = "CharacterAsset.TriggerKey"
STEER_KEY: str = "CharacterAsset.SteerKey"
PLACE_KEY: str = "CharacterAsset.PlaceKey"

# ── Box records ──────────────────────────────────────────────────────────

BOX_X: int = 0
BOX_Y: int = 1
BOX_WIDTH: int = 2           # half-extent
BOX_HEIGHT: int = 3          # half-extent

# ── PushCollisionKey ─────────────────────────────────────────────────────

PUSH_CONDITION: int = 0
PUSH_ATTRIBUTE: int = 1
PUSH_BOX_ID: int = 2

# Push keys carry no collision_type; placed push boxes are reported with this one
PUSH_COLLISION_TYPE: int = 0

# ── DamageCollisionKey ───────────────────────────────────────────────────

DAMAGE_CONDITION: int = 0
DAMAGE_COLLISION_TYPE: int = 1
DAMAGE_IMMUNE: int = 2
DAMAGE_EXTEND: int = 3
DAMAGE_LEVEL: int = 4
DAMAGE_TYPE_FLAG: int = 5
DAMAGE_HEAD_LIST: int = 9
DAMAGE_BODY_LIST: int = 10
DAMAGE_LEG_LIST: int = 11
DAMAGE_THROW_LIST: int = 12

# ── AttackCollisionKey ───────────────────────────────────────────────────

ATTACK_CONDITION: int = 0
ATTACK_COLLISION_TYPE: int = 1
ATTACK_HIT_ID: int = 2
ATTACK_GUARD_BIT: int = 3
ATTACK_KIND_FLAG: int = 4
ATTACK_HIT_OFFSET: int = 4   # shares its slot with kind_flag in the format
ATTACK_BOX_LIST: int = 11

# collision_type of attack keys whose boxes live in the ProximityBox table
PROXIMITY_COLLISION_TYPE: int = 3

# ── Triggers ─────────────────────────────────────────────────────────────

TRIGGER_KEY_GROUP: int = 0
TRIGGER_KEY_CONDITION_FLAG: int = 1
TRIGGER_GROUP_MASKS: int = 1
TRIGGER_ACTION: int = 5

TRIGGER_MASK_BITS: int = 64

# ── SteerKey / PlaceKey ──────────────────────────────────────────────────

STEER_OPERATION: int = 0
STEER_VALUE_TYPE: int = 1
STEER_MODIFY_VALUE: int = 4

PLACE_AXIS: int = 1
PLACE_SAMPLES: int = 3

# ── Action records (Action.data) ─────────────────────────────────────────

ACTION_FRAME_RECORD: int = 0
ACTION_FIRST_ACTIVE_FRAME: int = 0
ACTION_RECOVERY_FRAME: int = 1
ACTION_END_FRAME: int = 2

ACTION_STATE_RECORD: int = 1
ACTION_LOOP_COUNT: int = 0

# Sentinel used by frame and loop-count fields ("N/A" / "infinite")
NOT_APPLICABLE: int = -1

# ── Condition flags (TriggerKey) ─────────────────────────────────────────

# Display order of the cancel-condition labels.
CONDITION_FLAG_LABELS: tuple[tuple[int, str], ...] = (
    (0x1, "Hit"),
    (0x2, "Guard"),
    (0x4, "Whiff"),
    (0x400, "Counter"),
    (0x1000, "Parry"),
    (0x2000, "Just"),
    (0x800, "Strike"),
    (0x8, "Armor"),
    (0x10, "Jump"),
    (0x20, "SuperJump"),
    (0x80, "Fly"),
    (0x100, "WallBk"),
    (0x40000, "VJump"),
    (0x80000, "FJump"),
    (0x100000, "BJump"),
    (0x200000, "Throw"),
    (0x4000, "Normal"),
    (0x8000, "Easy"),
    (0x10000, "Extra"),
    (0x40, "Defer"),
    (0x20000, "Inhibit"),
    (0x400000, "Terminator"),
)

FLAG_SEPARATOR: str = " | "
