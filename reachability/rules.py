MIN_STEPS = 0
