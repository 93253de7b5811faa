"""NES audio processing unit with pulse and triangle channels."""