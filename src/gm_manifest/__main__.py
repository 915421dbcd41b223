from gm_manifest.cli import app

app(prog_name="gm-manifest")
