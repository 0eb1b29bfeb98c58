import sys
import os

# Add the api directory to sys.path
sys.path.append(os.path.join(os.getcwd(), "services/api"))

EXPECTED_ROUTES = {
    ("POST", "/api/amounts/validate"),
    ("POST", "/api/amounts/parse"),
    ("POST", "/api/amounts/scale"),
    ("POST", "/api/amounts/scale-ingredients"),
    ("POST", "/api/amounts/format"),
    ("GET", "/api/ready"),
}

try:
    from amounts.main import app
    print("App imported successfully")

    registered = set()
    for route in app.routes:
        for method in getattr(route, "methods", None) or ():
            registered.add((method, route.path))

    missing = sorted(EXPECTED_ROUTES - registered)
    for method, path in missing:
        print(f"ERROR: Route {method} {path} NOT FOUND")
    if missing:
        sys.exit(1)
    print(f"All {len(EXPECTED_ROUTES)} amount routes registered")

except Exception as e:
    print(f"App import failed: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)
