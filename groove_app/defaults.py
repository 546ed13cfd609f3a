from .models import ExerciseType

STRENGTH = ExerciseType.STRENGTH
MOBILITY = ExerciseType.MOBILITY

DEFAULT_STARTING_REPS = 4
DEFAULT_STARTING_SECONDS = 30

# Bilateral counts are per side; several start below the default on purpose.
DEFAULT_EXERCISES = [
    # Lower body
    {
        "id": "deep_squat",
        "name": "Deep Squat (Paleo Chair)",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_SECONDS,
        "is_timed": True,
        "description": "A resting squat held for time. Heels down, butt to ankles.",
        "related_stretch": "Ankle Circles: Rotate each ankle 10 times in each direction.",
    },
    {
        "id": "air_squat",
        "name": "Standard Air Squat",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "description": "Basic knee/hip flexion. Keep chest high.",
        "related_stretch": "Standing Quad Stretch: Pull foot to glutes, hold 30 seconds each side.",
    },
    {
        "id": "reverse_lunge",
        "name": "Reverse Lunge",
        "type": STRENGTH,
        "current_reps": 3,
        "is_bilateral": True,
        "description": "Easier on the knees than forward lunges; opens the hip flexor of the trailing leg.",
        "related_stretch": "Hip Flexor Stretch: Kneel on one knee, push hips forward. Hold 30 seconds each side.",
    },
    {
        "id": "cossack_squat",
        "name": "Cossack Squat",
        "type": STRENGTH,
        "current_reps": 3,
        "is_bilateral": True,
        "description": "A side-to-side squat that deeply stretches the inner groin and trains lateral mobility.",
        "related_stretch": "Adductor Stretch: Wide stance, shift weight to one side, hold 30 seconds.",
    },
    {
        "id": "single_leg_glute_bridge",
        "name": "Single-Leg Glute Bridge",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "is_bilateral": True,
        "description": "Lying on back, one foot on floor, driving hips up. Excellent for glute isolation.",
        "related_stretch": "Figure-4 Stretch: Ankle on opposite knee, pull knee toward chest.",
    },
    {
        "id": "bulgarian_split_squat",
        "name": "Bulgarian Split Squat",
        "type": STRENGTH,
        "current_reps": 3,
        "is_bilateral": True,
        "description": "Put your back foot on a couch or low wall (or just hover it). The king of leg builders.",
        "related_stretch": "Pigeon Pose: Leg folded under body, lean forward to open hip.",
    },
    {
        "id": "pistol_squat",
        "name": "Pistol Squat",
        "type": STRENGTH,
        "current_reps": 2,
        "is_bilateral": True,
        "description": "Single-leg squat. Modify by holding a doorframe or sitting to a chair.",
        "related_stretch": "Standing Hamstring Stretch: Foot on low surface, lean forward.",
    },
    {
        "id": "duck_walk",
        "name": "Duck Walk",
        "type": STRENGTH,
        "current_reps": 10,
        "description": "Walking while in a full squat position. Great for ankle mobility.",
        "related_stretch": "Deep Squat Hold: Rest in bottom squat position for 30 seconds.",
    },
    {
        "id": "calf_raises",
        "name": "Calf Raises",
        "type": STRENGTH,
        "current_reps": 10,
        "description": "Standing on a flat floor or a stair step.",
        "related_stretch": "Wall Calf Stretch: Hands on wall, one leg back, heel down.",
    },
    {
        "id": "broad_jump",
        "name": "Broad Jump",
        "type": STRENGTH,
        "current_reps": 3,
        "description": "Explosive power. Jump forward for distance, land softly.",
        "related_stretch": "Dynamic Leg Swings: Forward and back, 10 each leg.",
    },
    # Upper body push
    {
        "id": "standard_pushup",
        "name": "Standard Push-Up",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "description": "The classic. Targets chest and triceps.",
        "related_stretch": "Doorway Chest Stretch: Arms on frame at 90°, lean forward, hold 30 seconds.",
    },
    {
        "id": "diamond_pushup",
        "name": "Diamond Push-Up",
        "type": STRENGTH,
        "current_reps": 3,
        "description": "Hands close together to target triceps.",
        "related_stretch": "Tricep Stretch: Elbow overhead, push down gently.",
    },
    {
        "id": "wide_grip_pushup",
        "name": "Wide Grip Push-Up",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "description": "Hands wider than shoulders to target chest.",
        "related_stretch": "Doorway Chest Stretch: Arms wide on frame, lean through.",
    },
    {
        "id": "pike_pushup",
        "name": "Pike Push-Up",
        "type": STRENGTH,
        "current_reps": 3,
        "description": "Body in an upside-down V. Targets the shoulders (simulates a handstand push-up).",
        "related_stretch": "Shoulder Circles: Large circles forward and back, 10 each direction.",
    },
    {
        "id": "hindu_pushup",
        "name": "Hindu Push-Up (Dive Bomber)",
        "type": STRENGTH,
        "current_reps": 3,
        "description": "Swooping from a Downward Dog into a Cobra pose. Works shoulders, chest, and spinal flexibility.",
        "related_stretch": "Cobra Pose: Lie on stomach, push chest up, hold 30 seconds.",
    },
    {
        "id": "plank_to_pushup",
        "name": "Plank-to-Push-Up",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "description": "Starting in a forearm plank, pushing up to a hand plank, and back down.",
        "related_stretch": "Wrist Circles: Rotate wrists 10 times each direction.",
    },
    # Upper body pull and back
    {
        "id": "prone_cobra",
        "name": "Prone Cobra / Superman",
        "type": STRENGTH,
        "current_reps": 5,
        "description": "Lying on stomach, lifting chest and thighs off the ground. Essential for strengthening the lower back.",
        "related_stretch": "Child's Pose: Sit back on heels, arms extended, breathe deeply.",
    },
    {
        "id": "prone_ywt",
        "name": "Prone Y-W-T Raises",
        "type": STRENGTH,
        "current_reps": 3,
        "description": "Lying on stomach, moving arms into Y, W, and T shapes to fire the rhomboids and rear delts.",
        "related_stretch": "Cross-Body Shoulder Stretch: Pull arm across chest, hold 20 seconds each.",
    },
    {
        "id": "bear_crawl",
        "name": "Bear Crawl",
        "type": STRENGTH,
        "current_reps": 10,
        "description": "Walking on hands and toes. Builds shoulder stability and core strength.",
        "related_stretch": "Downward Dog: Hands and feet on floor, hips high, hold 30 seconds.",
    },
    {
        "id": "crab_walk",
        "name": "Crab Walk",
        "type": STRENGTH,
        "current_reps": 10,
        "description": "Walking on hands and feet with chest facing up. Opens the chest/shoulders.",
        "related_stretch": "Chest Opener: Clasp hands behind back, lift and squeeze.",
    },
    {
        "id": "pullups",
        "name": "Pull-Ups",
        "type": STRENGTH,
        "current_reps": 2,
        "description": "Hang from a bar, pull chin above the bar. Use a doorway bar or playground.",
        "related_stretch": "Lat Stretch: Hang from bar with relaxed shoulders, or reach arm overhead and lean to side.",
    },
    {
        "id": "dips",
        "name": "Dips",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "description": "Using a chair or low surface, lower body by bending elbows. Targets triceps and chest.",
        "related_stretch": "Tricep Stretch: Elbow overhead, push down gently.",
    },
    # Core and midline
    {
        "id": "standard_plank",
        "name": "Standard Plank",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_SECONDS,
        "is_timed": True,
        "description": "Creating rigid tension from head to heel.",
        "related_stretch": "Cobra Pose: Lie on stomach, push chest up, breathe.",
    },
    {
        "id": "side_plank",
        "name": "Side Plank",
        "type": STRENGTH,
        "current_reps": 20,
        "is_timed": True,
        "is_bilateral": True,
        "description": "Targets the obliques and lateral hip stability.",
        "related_stretch": "Side Lying Stretch: Reach arm overhead, elongate the side body.",
    },
    {
        "id": "dead_bug",
        "name": "Dead Bug",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "is_bilateral": True,
        "description": "Lying on back, moving opposite arm and leg while keeping the lower back glued to the floor.",
        "related_stretch": "Supine Twist: Knees to one side, arms out, hold 30 seconds each.",
    },
    {
        "id": "bird_dog",
        "name": "Bird Dog",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "is_bilateral": True,
        "description": "Kneeling, extending opposite arm and leg. Great for balance and back health.",
        "related_stretch": "Cat-Cow: Arch and round the spine slowly, 5 cycles.",
    },
    {
        "id": "hollow_body_hold",
        "name": "Hollow Body Hold",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_SECONDS,
        "is_timed": True,
        "description": "The gymnast's staple. Lower back on floor, legs and arms extended and hovering.",
        "related_stretch": "Knees to Chest: Hug both knees, rock gently side to side.",
    },
    {
        "id": "l_sit",
        "name": "L-Sit (Floor)",
        "type": STRENGTH,
        "current_reps": 15,
        "is_timed": True,
        "description": "Sitting with legs straight, pushing hands into floor to lift butt (and maybe heels) off the ground.",
        "related_stretch": "Seated Forward Fold: Reach for toes, hold 30 seconds.",
    },
    {
        "id": "flutter_kicks",
        "name": "Flutter Kicks",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_SECONDS,
        "is_timed": True,
        "description": "Lying on back, legs straight, alternating small kicks up and down. Keep lower back pressed to floor.",
        "related_stretch": "Knees to Chest: Hug both knees, rock gently side to side.",
    },
    {
        "id": "hello_dollies",
        "name": "Hello Dollies",
        "type": STRENGTH,
        "current_reps": 10,
        "description": "Lying on back, legs straight up, spread legs apart then back together. Works inner thighs and core.",
        "related_stretch": "Butterfly Stretch: Soles together, knees out, lean forward.",
    },
    {
        "id": "situps",
        "name": "Sit-Ups",
        "type": STRENGTH,
        "current_reps": DEFAULT_STARTING_REPS,
        "description": "Lying on back, knees bent, curl up to touch knees with hands.",
        "related_stretch": "Cobra Pose: Lie on stomach, push chest up, hold 30 seconds.",
    },
    {
        "id": "crunches",
        "name": "Crunches",
        "type": STRENGTH,
        "current_reps": 10,
        "description": "Partial sit-up focusing on the upper abs. Lift shoulder blades off the ground.",
        "related_stretch": "Knees to Chest: Hug both knees, rock gently.",
    },
    # Mobility and restoration
    {
        "id": "worlds_greatest_stretch",
        "name": "World's Greatest Stretch",
        "type": MOBILITY,
        "current_reps": 3,
        "is_bilateral": True,
        "description": "A deep lunge with a thoracic rotation (reaching hand to sky).",
        "related_stretch": "Hold each position for 2-3 breaths before transitioning.",
    },
    {
        "id": "pigeon_pose",
        "name": "Pigeon Pose",
        "type": MOBILITY,
        "current_reps": DEFAULT_STARTING_SECONDS,
        "is_timed": True,
        "is_bilateral": True,
        "description": "Leg folded under body to open the outer hip/glute.",
        "related_stretch": "Figure-4 Stretch: On back, ankle on knee, pull toward chest.",
    },
    {
        "id": "90_90_hip_stretch",
        "name": "90/90 Hip Stretch",
        "type": MOBILITY,
        "current_reps": DEFAULT_STARTING_SECONDS,
        "is_timed": True,
        "is_bilateral": True,
        "description": "Sitting with legs in 90-degree angles; switching knees side to side for hip rotation.",
        "related_stretch": "Butterfly Stretch: Soles together, knees out, lean forward.",
    },
    {
        "id": "thoracic_bridge",
        "name": "Thoracic Bridge",
        "type": MOBILITY,
        "current_reps": 3,
        "is_bilateral": True,
        "description": "From a crab position, reaching one arm overhead and rotating to stretch the spine and belly.",
        "related_stretch": "Thread the Needle: On all fours, reach arm under body and rotate.",
    },
    {
        "id": "cat_cow",
        "name": "Cat-Cow",
        "type": MOBILITY,
        "current_reps": 5,
        "description": "On all fours, arching and rounding the spine with breath.",
        "related_stretch": "Child's Pose: Sit back on heels, arms extended, breathe deeply.",
    },
    {
        "id": "arm_circles",
        "name": "Arm Circles",
        "type": MOBILITY,
        "current_reps": 10,
        "description": "Large arm circles forward and backward to warm up shoulders.",
        "related_stretch": "Cross-Body Shoulder Stretch: Pull arm across chest, hold 20 seconds each.",
    },
]
