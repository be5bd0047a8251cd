"""idpix — decode hex identifiers into pixel-art colour grids and PNGs."""
