"""Identity domain: users and the intents that keep the stores in step."""
