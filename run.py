#!/usr/bin/env python3
"""
Run the Car Rental API
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "car_rental.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
