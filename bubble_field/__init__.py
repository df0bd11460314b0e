from bubble_field.bubble_states import BubbleState
from bubble_field.bubble_model import Bubble, spawn_bubble
from bubble_field.simulator import BubbleField
from bubble_field.shake_detection import ShakeDetectionState, record_motion_sample
