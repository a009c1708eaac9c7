import argparse

import uvicorn

SERVICES = {
    "gateway": "app:app",
    "presentations": "services.presentations.app:app",
    "slides": "services.slides.app:app",
    "frameworks": "services.frameworks.app:app",
    "voice-profiles": "services.voice_profiles.app:app",
    "ideas": "services.ideas.app:app",
}


def main():
    parser = argparse.ArgumentParser(description="Bootloader for SlideSmith FastAPI services.")
    parser.add_argument("service", choices=SERVICES.keys(), help="Service to start")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (dev mode)")
    args = parser.parse_args()

    app_path = SERVICES[args.service]
    print(f"[BOOTLOADER] Starting {args.service} on {args.host}:{args.port} ...")
    uvicorn.run(app_path, host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
