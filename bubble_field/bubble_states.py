from enum import Enum, auto

class BubbleState(Enum): # a bubble only ever moves forward through these
    RISING = auto() # floating up, can be tapped
    POPPING = auto() # burst animation playing
    REMOVED = auto() # gone from the field, a replacement took its place
