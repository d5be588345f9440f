"""Built-in movement catalog.

Pattern tags drive slot matching. Besides the movement pattern itself
(squat, hinge, push, pull, ...) a movement carries role tags:

- ``compound`` / ``isolation``: preference for main vs accessory work
- ``upper`` / ``lower``: used by the body-region constraints
- ``warmup`` / ``mobility`` / ``stretch``: preparation and cool-down
- ``conditioning`` / ``cardio``: metcon and monostructural work
- ``impact``: excluded by the ``low_impact`` constraint
- ``running``: excluded by the ``no_running`` constraint

Bodyweight movements require the ``bodyweight`` token. Mobility drills and
stretches require nothing, so every plan can warm up and cool down.
"""

from __future__ import annotations

from workout_engine.models.enums import BODYWEIGHT, MovementCategory
from workout_engine.models.movement import Movement

_S = MovementCategory.STRENGTH
_C = MovementCategory.CARDIO
_P = MovementCategory.PLYOMETRIC
_M = MovementCategory.MOBILITY
_K = MovementCategory.CORE

NO_EQUIPMENT = ""


def _m(
    movement_id: str,
    name: str,
    patterns: str,
    equipment: str = BODYWEIGHT,
    category: MovementCategory = _S,
) -> Movement:
    return Movement(
        id=movement_id,
        name=name,
        patterns=frozenset(patterns.split()),
        required_equipment=frozenset(equipment.split()),
        category=category,
    )


DEFAULT_MOVEMENTS: tuple[Movement, ...] = (
    # --- Barbell ---
    _m("back-squat", "Back Squat", "squat lower compound", "barbell"),
    _m("front-squat", "Front Squat", "squat lower compound", "barbell"),
    _m("deadlift", "Deadlift", "hinge lower compound", "barbell"),
    _m("romanian-deadlift", "Romanian Deadlift", "hinge lower compound", "barbell"),
    _m("bench-press", "Bench Press", "push upper compound", "barbell bench"),
    _m("overhead-press", "Overhead Press", "push upper compound", "barbell"),
    _m("push-press", "Push Press", "push upper compound power", "barbell"),
    _m("barbell-row", "Barbell Row", "pull upper compound", "barbell"),
    _m("hip-thrust", "Barbell Hip Thrust", "hinge lower", "barbell"),
    _m("reverse-lunge-barbell", "Barbell Reverse Lunge", "lunge lower compound", "barbell"),
    _m("power-clean", "Power Clean", "hinge power compound conditioning", "barbell"),
    _m("thruster", "Barbell Thruster", "squat push compound conditioning", "barbell"),
    _m("hang-power-snatch", "Hang Power Snatch", "hinge power compound conditioning", "barbell"),
    # --- Dumbbell ---
    _m("goblet-squat", "Goblet Squat", "squat lower compound", "dumbbell"),
    _m("db-bench-press", "Dumbbell Bench Press", "push upper compound", "dumbbell bench"),
    _m("db-shoulder-press", "Dumbbell Shoulder Press", "push upper compound", "dumbbell"),
    _m("db-row", "Single-Arm Dumbbell Row", "pull upper compound", "dumbbell"),
    _m("db-rdl", "Dumbbell Romanian Deadlift", "hinge lower compound", "dumbbell"),
    _m("db-walking-lunge", "Dumbbell Walking Lunge", "lunge lower compound", "dumbbell"),
    _m("db-step-up", "Dumbbell Step-Up", "lunge lower", "dumbbell box"),
    _m("db-snatch", "Dumbbell Snatch", "hinge power conditioning", "dumbbell"),
    _m("db-thruster", "Dumbbell Thruster", "squat push conditioning", "dumbbell"),
    _m("db-curl", "Dumbbell Curl", "pull upper isolation", "dumbbell"),
    _m("db-lateral-raise", "Dumbbell Lateral Raise", "push upper isolation", "dumbbell"),
    _m("db-triceps-extension", "Dumbbell Triceps Extension", "push upper isolation", "dumbbell"),
    _m("farmer-carry", "Farmer Carry", "carry core conditioning", "dumbbell"),
    _m("renegade-row", "Renegade Row", "pull core upper", "dumbbell"),
    _m("devil-press", "Devil Press", "hinge push conditioning impact", "dumbbell"),
    # --- Kettlebell ---
    _m("kb-swing", "Kettlebell Swing", "hinge power conditioning lower", "kettlebell"),
    _m("kb-goblet-squat", "Kettlebell Goblet Squat", "squat lower compound", "kettlebell"),
    _m("kb-clean-and-press", "Kettlebell Clean and Press", "push hinge compound conditioning", "kettlebell"),
    _m("kb-snatch", "Kettlebell Snatch", "hinge power conditioning", "kettlebell"),
    _m("turkish-get-up", "Turkish Get-Up", "core push full", "kettlebell"),
    _m("kb-halo", "Kettlebell Halo", "mobility warmup upper", "kettlebell", _M),
    # --- Pull-up bar / rings ---
    _m("pull-up", "Pull-Up", "pull upper compound", "pullup-bar"),
    _m("chin-up", "Chin-Up", "pull upper compound", "pullup-bar"),
    _m("hanging-knee-raise", "Hanging Knee Raise", "core", "pullup-bar", _K),
    _m("toes-to-bar", "Toes-to-Bar", "core conditioning", "pullup-bar", _K),
    _m("ring-row", "Ring Row", "pull upper", "rings"),
    _m("ring-dip", "Ring Dip", "push upper compound", "rings"),
    # --- Bodyweight strength ---
    _m("air-squat", "Air Squat", "squat lower conditioning"),
    _m("push-up", "Push-Up", "push upper compound"),
    _m("pike-push-up", "Pike Push-Up", "push upper"),
    _m("diamond-push-up", "Diamond Push-Up", "push upper isolation"),
    _m("inverted-row", "Inverted Row", "pull upper", "bodyweight table"),
    _m("reverse-lunge", "Reverse Lunge", "lunge lower"),
    _m("split-squat", "Bulgarian Split Squat", "lunge squat lower compound"),
    _m("glute-bridge", "Glute Bridge", "hinge lower"),
    _m("single-leg-rdl", "Single-Leg Romanian Deadlift", "hinge lower"),
    _m("wall-sit", "Wall Sit", "squat lower isolation"),
    # --- Plyometric / metcon ---
    _m("burpee", "Burpee", "conditioning full impact", BODYWEIGHT, _P),
    _m("jump-squat", "Jump Squat", "squat power conditioning lower impact", BODYWEIGHT, _P),
    _m("mountain-climber", "Mountain Climber", "core conditioning", BODYWEIGHT, _K),
    _m("jumping-jack", "Jumping Jack", "conditioning warmup impact", BODYWEIGHT, _P),
    _m("high-knees", "High Knees", "conditioning warmup impact", BODYWEIGHT, _P),
    _m("skater-hop", "Skater Hop", "lunge conditioning lower impact", BODYWEIGHT, _P),
    _m("box-jump", "Box Jump", "power conditioning lower impact", "box", _P),
    _m("wall-ball", "Wall Ball", "squat push conditioning", "medicine-ball"),
    _m("med-ball-slam", "Medicine Ball Slam", "power conditioning core", "medicine-ball"),
    _m("double-under", "Double-Under", "conditioning impact", "jump-rope", _P),
    _m("jump-rope", "Jump Rope", "conditioning warmup impact", "jump-rope", _P),
    # --- Monostructural cardio ---
    _m("run", "Run", "cardio conditioning running impact", BODYWEIGHT, _C),
    _m("shuttle-run", "Shuttle Run", "cardio conditioning running impact", BODYWEIGHT, _C),
    _m("row-erg", "Row", "cardio conditioning", "rower", _C),
    _m("bike-erg", "Assault Bike", "cardio conditioning", "bike", _C),
    _m("ski-erg", "Ski Erg", "cardio conditioning", "ski-erg", _C),
    _m("treadmill-run", "Treadmill Run", "cardio conditioning running impact", "treadmill", _C),
    # --- Core ---
    _m("plank", "Plank", "core"),
    _m("side-plank", "Side Plank", "core"),
    _m("hollow-hold", "Hollow Hold", "core"),
    _m("dead-bug", "Dead Bug", "core warmup"),
    _m("bird-dog", "Bird Dog", "core warmup"),
    _m("russian-twist", "Russian Twist", "core rotation"),
    _m("v-up", "V-Up", "core conditioning"),
    # --- Warm-up / mobility ---
    _m("arm-circles", "Arm Circles", "warmup mobility upper", NO_EQUIPMENT, _M),
    _m("leg-swings", "Leg Swings", "warmup mobility lower", NO_EQUIPMENT, _M),
    _m("hip-circles", "Hip Circles", "warmup mobility lower", NO_EQUIPMENT, _M),
    _m("worlds-greatest-stretch", "World's Greatest Stretch", "warmup mobility stretch full", NO_EQUIPMENT, _M),
    _m("inchworm", "Inchworm", "warmup mobility full", NO_EQUIPMENT, _M),
    _m("band-pull-apart", "Band Pull-Apart", "warmup mobility pull upper", "band", _M),
    # --- Cool-down / stretch ---
    _m("cat-cow", "Cat-Cow", "mobility stretch", NO_EQUIPMENT, _M),
    _m("childs-pose", "Child's Pose", "stretch mobility", NO_EQUIPMENT, _M),
    _m("pigeon-stretch", "Pigeon Stretch", "stretch lower", NO_EQUIPMENT, _M),
    _m("hamstring-stretch", "Standing Hamstring Stretch", "stretch lower", NO_EQUIPMENT, _M),
    _m("couch-stretch", "Couch Stretch", "stretch lower", NO_EQUIPMENT, _M),
    _m("doorway-chest-stretch", "Doorway Chest Stretch", "stretch upper", NO_EQUIPMENT, _M),
    _m("thread-the-needle", "Thread the Needle", "stretch mobility upper", NO_EQUIPMENT, _M),
)
