"""Single-user workout log: durable sets per workout with a reconciled session cache."""
