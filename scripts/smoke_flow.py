"""Smoke test the full flow against a running server: intent -> generate -> preview -> download"""
import io
import sys
import zipfile

import httpx

# "A website for my bakery in Chennai with a menu and contact details"
TEST_TAMIL_TEXT = "சென்னையில் உள்ள என் பேக்கரிக்கு மெனு மற்றும் தொடர்பு விவரங்களுடன் ஒரு இணையதளம்"


def run_flow(backend_url: str = "http://localhost:3000") -> bool:
    """Run the four steps and report each one"""
    print("\n" + "=" * 70)
    print("Testing Full Generation Flow")
    print("=" * 70 + "\n")

    with httpx.Client(base_url=backend_url, timeout=180) as client:
        # Step 1: Intent
        print("[1/4] Detecting intent...")
        data = client.post("/intent", json={"tamilText": TEST_TAMIL_TEXT}).json()
        if not data.get("success"):
            print(f"     [ERROR] Intent detection failed: {data.get('error')}")
            return False
        intent = data["intent"]
        print(f"     [OK] Intent: {intent[:100]}")

        # Step 2: Generate
        print("\n[2/4] Generating site...")
        data = client.post("/generate-code", json={"intent": intent}).json()
        if not data.get("success"):
            print(f"     [ERROR] Code generation failed: {data.get('error')}")
            return False
        print(f"     [OK] Files: {', '.join(data['files'])}")

        # Step 3: Preview
        print("\n[3/4] Checking preview...")
        preview = client.get("/preview/index.html")
        if preview.status_code != 200:
            print(f"     [ERROR] Preview returned {preview.status_code}")
            return False
        html_content = preview.text
        print(f"     [OK] HTML length: {len(html_content)} chars")
        if "<html" not in html_content.lower():
            print("     [WARN] Output does not look like an HTML document")

        # Step 4: Download
        print("\n[4/4] Downloading archive...")
        download = client.get("/download")
        if download.status_code != 200:
            print(f"     [ERROR] Download returned {download.status_code}")
            return False
        with zipfile.ZipFile(io.BytesIO(download.content)) as zf:
            names = zf.namelist()
            matches = zf.read("index.html").decode("utf-8") == html_content if "index.html" in names else False
        print(f"     [OK] Archive entries: {names} | matches preview: {matches}")
        if not matches:
            return False

    print("\n" + "=" * 70)
    print("[OK] Full generation flow completed successfully!")
    print("=" * 70 + "\n")
    return True


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"
    sys.exit(0 if run_flow(url) else 1)
