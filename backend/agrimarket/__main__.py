import os

import uvicorn

# Run the application
if __name__ == "__main__":
    port = int(os.getenv("PORT", "3001"))
    uvicorn.run("agrimarket.main:app", host="0.0.0.0", port=port)
